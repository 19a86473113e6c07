"""Tests for the smart content smart resolver and its provider registry."""

import pytest

from dimcontent.core.errors import ResolutionError, SmartResolverNotFoundError
from dimcontent.resolver.values import ResolvableResource, SmartResolvable
from dimcontent.resources import SmartContentSmartResolver, SmartResolverProvider


class FakeSmartContentProvider:
    resource_loader_key = "pages"

    def __init__(self, ids, total=None):
        self.ids = ids
        self.total = total if total is not None else len(ids)
        self.count_calls = 0

    def find_flat_by(self, filters, sort_bys, params):
        return [{"id": i} for i in self.ids]

    def count_by(self, filters, params):
        self.count_calls += 1
        return self.total


def _resolvable(limit=None, page=1, provider="pages", tags=None) -> SmartResolvable:
    return SmartResolvable(
        data={
            "value": {"tags": tags or [], "present_as": "list"},
            "filters": {"limit": limit, "page": page, "tag_operator": "OR", "data_source": None},
            "sort_bys": {"title": "ASC"},
            "parameters": {"provider": provider},
        },
        resource_loader_key="smart_content",
    )


class TestSmartContentSmartResolver:
    def test_resolvables_and_view(self):
        resolver = SmartContentSmartResolver({"pages": FakeSmartContentProvider(["1", "2"])})

        content_view = resolver.resolve(_resolvable(tags=["news"]), "en")

        assert [r.id for r in content_view.content] == ["1", "2"]
        assert all(isinstance(r, ResolvableResource) for r in content_view.content)
        assert content_view.content[0].resource_loader_key == "pages"
        assert content_view.view["tags"] == ["news"]
        assert content_view.view["sort_bys"] == {"title": "ASC"}
        assert content_view.view["paginated"] is False
        assert content_view.view["total"] == 2

    def test_pagination(self):
        provider = FakeSmartContentProvider(["1", "2", "3", "4"], total=7)
        resolver = SmartContentSmartResolver({"pages": provider})

        view = resolver.resolve(_resolvable(limit=3, page=2)).view

        assert view["paginated"] is True
        assert view["total"] == 7
        assert view["max_page"] == 3
        assert view["has_next_page"] is True
        assert provider.count_calls == 1

    def test_short_page_skips_count(self):
        provider = FakeSmartContentProvider(["1"], total=99)
        resolver = SmartContentSmartResolver({"pages": provider})

        view = resolver.resolve(_resolvable(limit=3)).view

        assert view["total"] == 1
        assert view["has_next_page"] is False
        assert provider.count_calls == 0

    def test_unknown_provider(self):
        resolver = SmartContentSmartResolver({"pages": FakeSmartContentProvider([])})
        with pytest.raises(ResolutionError, match="articles"):
            resolver.resolve(_resolvable(provider="articles"))

    def test_provider_must_be_a_string(self):
        resolver = SmartContentSmartResolver({})
        with pytest.raises(ResolutionError, match="must be a string"):
            resolver.resolve(_resolvable(provider=None))


class TestSmartResolverProvider:
    def test_get(self):
        resolver = SmartContentSmartResolver({})
        provider = SmartResolverProvider([resolver])
        assert provider.get("smart_content") is resolver
        assert provider.has("smart_content")

    def test_missing(self):
        with pytest.raises(SmartResolverNotFoundError):
            SmartResolverProvider().get("smart_content")
