"""Tests for the resolvable priority queue."""

from dimcontent.resolver.queue import ResolvableResourceQueueProcessor, add_resolvable
from dimcontent.resolver.values import ResolvableResource


def _resolvable(resource_id, loader="pages", priority=0, metadata=None) -> ResolvableResource:
    return ResolvableResource(id=resource_id, resource_loader_key=loader, priority=priority, metadata=metadata)


class TestAddResolvable:
    def test_shape(self):
        queue: dict = {}
        resolvable = _resolvable("1", priority=150)
        add_resolvable(queue, resolvable, 2)
        assert queue == {150: {"pages": {2: {"1": {"": resolvable}}}}}

    def test_metadata_variants_kept_apart(self):
        queue: dict = {}
        add_resolvable(queue, _resolvable("1"), 0)
        add_resolvable(queue, _resolvable("1", metadata={"properties": {"title": "title"}}), 0)
        assert len(queue[0]["pages"][0]["1"]) == 2


class TestQueueProcessor:
    def test_merge_sorts_by_priority(self):
        processor = ResolvableResourceQueueProcessor()
        existing: dict = {}
        add_resolvable(existing, _resolvable("1", priority=0), 0)
        incoming: dict = {}
        add_resolvable(incoming, _resolvable("2", priority=2048, loader="smart_content"), 0)
        add_resolvable(incoming, _resolvable("3", priority=150), 1)

        merged = processor.merge_resolvable_resources(incoming, existing)
        assert list(merged) == [2048, 150, 0]

    def test_merge_combines_ids(self):
        processor = ResolvableResourceQueueProcessor()
        existing: dict = {}
        add_resolvable(existing, _resolvable("1"), 0)
        incoming: dict = {}
        add_resolvable(incoming, _resolvable("2"), 0)
        merged = processor.merge_resolvable_resources(incoming, existing)
        assert set(merged[0]["pages"][0]) == {"1", "2"}

    def test_extract_highest_priority(self):
        processor = ResolvableResourceQueueProcessor()
        queue: dict = {}
        high = _resolvable("1", priority=150)
        add_resolvable(queue, high, 1)
        add_resolvable(queue, _resolvable("2", priority=0), 0)

        resources, depths = processor.extract_highest_priority_resources(queue, max_depth=3)

        assert resources == {"pages": {"1": {"": high}}}
        assert depths == {"pages": {"1": 1}}
        assert list(queue) == [0]

    def test_extract_drops_too_deep(self):
        processor = ResolvableResourceQueueProcessor()
        queue: dict = {}
        add_resolvable(queue, _resolvable("1"), 4)
        add_resolvable(queue, _resolvable("2"), 3)
        resources, depths = processor.extract_highest_priority_resources(queue, max_depth=3)
        assert list(resources["pages"]) == ["2"]
        assert queue == {}

    def test_extract_empty(self):
        assert ResolvableResourceQueueProcessor().extract_highest_priority_resources({}, 3) == ({}, {})
