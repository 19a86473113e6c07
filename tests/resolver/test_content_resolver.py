"""End to end tests of ContentResolver on the imported fixture contents."""

import pytest

from dimcontent.container import ContentContainer
from dimcontent.core.errors import ContentError
from dimcontent.domain import Page


@pytest.fixture
def resolve(imported_contents):
    def _resolve(page_id="home", locale="en", properties=None):
        page = imported_contents.pages.get(page_id)
        dimension_content = imported_contents.content_aggregator.aggregate(
            page, {"locale": locale, "stage": "draft"}
        )
        return imported_contents.content_resolver.resolve(dimension_content, properties)

    return _resolve


class TestResolveHome:
    def test_template_content(self, resolve, imported_contents):
        data = resolve()

        assert data["resource"] is imported_contents.pages.get("home")
        assert data["content"]["title"] == "Home"
        assert data["content"]["subtitle"] == "Start here"
        assert data["template"] == "default"

    def test_selections_are_loaded(self, resolve):
        data = resolve()

        assert [page["title"] for page in data["content"]["pages"]] == ["About us"]
        assert data["content"]["snippet"]["title"] == "Contact"
        assert data["content"]["snippet"]["color"] == "blue"
        assert data["view"]["pages"]["ids"] == ["about"]

    def test_hidden_blocks_are_dropped(self, resolve):
        data = resolve()

        assert data["content"]["blocks"] == [
            {"type": "text", "text": "<p>First</p>"},
            {"type": "quote", "quote": "Form follows function", "author": "Sullivan"},
        ]

    def test_extension(self, resolve):
        data = resolve()

        assert data["extension"]["excerpt"]["title"] == "Welcome home"
        assert data["extension"]["seo"]["title"] == "Home | Example"
        assert data["extension"]["dimension_content"] == {"id": "home"}

    def test_settings(self, resolve):
        data = resolve()

        assert data["main_webspace"] == "website"
        assert data["available_locales"] == ["en", "de"]
        assert data["localizations"] == {
            "de": {"locale": "de", "url": "/de/startseite", "alternate": True},
            "en": {"locale": "en", "url": "/en/home", "alternate": True},
        }

    def test_reference_store_collects_loaded_resources(self, resolve, imported_contents):
        resolve()
        assert set(imported_contents.reference_store.get_all()) == {"pages-about", "snippets-contact"}

    def test_other_locale(self, resolve):
        data = resolve(locale="de")
        assert data["content"]["title"] == "Startseite"
        assert data["content"]["pages"] == []
        assert data["content"]["snippet"] is None


class TestResolveProperties:
    def test_properties_mapped_to_root(self, resolve):
        data = resolve(properties={"title": "title", "id": "object.id"})

        assert data["title"] == "Home"
        assert data["id"] == "home"

    def test_excerpt_property(self, resolve):
        data = resolve(properties={"teaser": "excerpt.title"})
        assert data["teaser"] == "Welcome home"


class TestResolveLimits:
    def test_max_depth_zero_drops_selections(self, resolve, imported_contents):
        imported_contents.content_resolver.max_depth = 0

        data = resolve()

        assert data["content"]["title"] == "Home"
        assert data["content"]["pages"] == [None]
        assert data["content"]["snippet"] is None

    def test_unlocalized_dimension_content(self, imported_contents):
        page = imported_contents.pages.get("home")
        unlocalized = page.get_dimension_content(None)

        with pytest.raises(ContentError, match="localized"):
            imported_contents.content_resolver.resolve(unlocalized)

    def test_unknown_page_selection_ids(self, container):
        page = Page(id="lonely")
        dimension_content = page.get_or_create_dimension_content("en")
        dimension_content.template_key = "default"
        dimension_content.template_data = {"title": "Alone", "pages": ["ghost"]}
        container.pages.add(page)

        data = container.content_resolver.resolve(dimension_content)

        assert data["content"]["title"] == "Alone"
        assert data["content"]["pages"] == [None]
        assert container.reference_store.get_all() == []


class FakeNewsProvider:
    resource_loader_key = "pages"

    def __init__(self):
        self.filters = None

    def find_flat_by(self, filters, sort_bys, params):
        self.filters = filters
        return [{"id": "about"}, {"id": "gone"}]

    def count_by(self, filters, params):
        return 2


class TestResolveSmartContent:
    def test_smart_content_items_are_resolved(self, settings, contents_file):
        provider = FakeNewsProvider()
        with ContentContainer(settings, smart_content_providers={"pages": provider}) as container:
            container.create_schema()
            container.content_importer.import_file(contents_file)

            page = Page(id="news")
            dimension_content = page.get_or_create_dimension_content("en")
            dimension_content.template_key = "homepage"
            dimension_content.template_data = {"title": "News", "news": {"tags": ["team"], "limit_result": 5}}

            data = container.content_resolver.resolve(dimension_content)

        assert data["content"]["title"] == "News"
        [about, gone] = data["content"]["news"]
        assert about["title"] == "About us"
        assert gone is None
        assert provider.filters["tags"] == ["team"]
        assert provider.filters["limit"] == 5
