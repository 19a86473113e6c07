"""Tests for ContentNormalizer and the capability normalizers."""

from datetime import datetime

from dimcontent.domain import Page, Snippet, User
from dimcontent.domain.models import WORKFLOW_PLACE_PUBLISHED, Category, Tag
from dimcontent.normalizer import ContentNormalizer, default_normalizers, normalize_value
from dimcontent.routing.model import Route


def _normalize(obj: object) -> dict:
    return ContentNormalizer(default_normalizers()).normalize(obj)


class TestNormalizeValue:
    def test_datetime(self):
        assert normalize_value(datetime(2024, 5, 1, 12, 0)) == "2024-05-01T12:00:00"

    def test_nested(self):
        value = {"tags": [Tag(id=1, name="a")], "when": (datetime(2024, 1, 1),)}
        assert normalize_value(value) == {
            "tags": [{"id": 1, "name": "a"}],
            "when": ["2024-01-01T00:00:00"],
        }


class TestContentNormalizer:
    def test_page_dimension_content(self):
        page = Page(id="1")
        dimension_content = page.create_dimension_content("en")
        dimension_content.template_key = "default"
        dimension_content.template_data = {"title": "Home", "locale": "shadowed"}
        dimension_content.creator = User(id=7)
        dimension_content.excerpt_categories = [Category(id=3)]
        dimension_content.excerpt_tags = [Tag(id=1, name="news")]
        dimension_content.route = Route(
            resource_key="pages", resource_id="1", locale="en", slug="/home"
        )
        dimension_content.workflow_place = WORKFLOW_PLACE_PUBLISHED
        dimension_content.workflow_published = datetime(2024, 1, 1)

        data = _normalize(dimension_content)

        assert data["id"] == "1"
        assert data["title"] == "Home"
        assert data["locale"] == "en"
        assert data["template"] == "default"
        assert data["creator"] == 7
        assert data["changer"] is None
        assert data["excerpt_categories"] == [3]
        assert data["excerpt_tags"] == ["news"]
        assert data["url"] == "/home"
        assert data["published"] == "2024-01-01T00:00:00"
        assert data["published_state"] is True
        for ignored in ("resource", "merged", "template_data", "template_key", "route", "workflow_published"):
            assert ignored not in data

    def test_snippet_has_no_page_capabilities(self):
        dimension_content = Snippet(id="s").create_dimension_content("en")
        data = _normalize(dimension_content)
        assert data["id"] == "s"
        assert "url" not in data
        assert "seo_title" not in data
        assert "author" not in data

    def test_route_less_page_has_no_url(self):
        data = _normalize(Page(id="1").create_dimension_content("en"))
        assert "url" not in data

    def test_plain_object(self):
        class Plain:
            def __init__(self) -> None:
                self.name = "x"
                self._private = 1

        assert _normalize(Plain()) == {"name": "x"}
