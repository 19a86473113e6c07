"""Tests for ReferenceStore."""

import uuid

from dimcontent.httpcache import ReferenceStore


class TestReferenceStore:
    def test_tags_are_prefixed_with_resource_key(self):
        store = ReferenceStore()
        store.add("1", "pages")
        store.add("contact", "snippets")
        assert store.get_all() == ["pages-1", "snippets-contact"]

    def test_uuids_are_not_prefixed(self):
        store = ReferenceStore()
        resource_id = str(uuid.uuid4())
        store.add(resource_id, "pages")
        assert store.get_all() == [resource_id]

    def test_duplicates(self):
        store = ReferenceStore()
        resource_id = str(uuid.uuid4())
        store.add("1", "pages")
        store.add("1", "pages")
        store.add(resource_id, "pages")
        store.add(resource_id, "snippets")
        assert store.get_all() == ["pages-1", resource_id]

    def test_reset(self):
        store = ReferenceStore()
        store.add("1", "pages")
        store.reset()
        assert store.get_all() == []
