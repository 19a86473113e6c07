"""Tests for RoutableDataMapper."""

import pytest

from dimcontent.core.errors import DataMappingError
from dimcontent.datamapper import RoutableDataMapper
from dimcontent.domain import STAGE_LIVE, Page, Snippet


@pytest.fixture
def mapper(route_repository, form_metadata_loader) -> RoutableDataMapper:
    return RoutableDataMapper(route_repository, form_metadata_loader)


def _variants(page: Page, stage: str = "draft"):
    unlocalized = page.get_or_create_dimension_content(None, stage)
    unlocalized.main_webspace = "website"
    localized = page.get_or_create_dimension_content("en", stage)
    localized.template_key = "default"
    return unlocalized, localized


class TestRoutableDataMapper:
    def test_creates_route(self, mapper, route_repository):
        page = Page(id="1")
        unlocalized, localized = _variants(page)
        mapper.map(unlocalized, localized, {"url": "/home"})
        route_repository.flush()

        route = localized.route
        assert route.slug == "/home"
        assert route.locale == "en"
        assert route.site == "website"
        assert route.resource_key == "pages"
        assert route.resource_id == "1"

    def test_updates_existing_route(self, mapper, route_repository):
        page = Page(id="1")
        unlocalized, localized = _variants(page)
        mapper.map(unlocalized, localized, {"url": "/home"})
        route_repository.flush()
        route = localized.route

        mapper.map(unlocalized, localized, {"url": "/start"})
        route_repository.flush()

        assert localized.route is route
        assert route.slug == "/start"

    def test_live_reuses_draft_route(self, mapper, route_repository):
        page = Page(id="1")
        draft_unlocalized, draft = _variants(page)
        mapper.map(draft_unlocalized, draft, {"url": "/home"})
        route_repository.flush()

        live_unlocalized, live = _variants(page, STAGE_LIVE)
        mapper.map(live_unlocalized, live, {"url": "/home"})
        assert live.route is draft.route

    def test_live_without_draft_route(self, mapper):
        live_unlocalized, live = _variants(Page(id="1"), STAGE_LIVE)
        with pytest.raises(DataMappingError, match="already created the route"):
            mapper.map(live_unlocalized, live, {"url": "/home"})

    def test_url_not_given(self, mapper):
        unlocalized, localized = _variants(Page(id="1"))
        mapper.map(unlocalized, localized, {"title": "x"})
        assert localized.route is None

    def test_url_must_be_string(self, mapper):
        unlocalized, localized = _variants(Page(id="1"))
        with pytest.raises(DataMappingError, match="to be a string"):
            mapper.map(unlocalized, localized, {"url": 5})

    def test_template_required(self, mapper):
        page = Page(id="1")
        with pytest.raises(DataMappingError, match="no template"):
            mapper.map(page.create_dimension_content(None), page.create_dimension_content("en"), {"url": "/x"})

    def test_not_routable_is_a_no_op(self, mapper):
        snippet = Snippet(id="s")
        mapper.map(snippet.create_dimension_content(None), snippet.create_dimension_content("en"), {"url": "/x"})
