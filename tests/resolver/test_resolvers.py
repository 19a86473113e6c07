"""Tests for the dimension content, template, excerpt, seo and settings resolvers."""

import pytest

from dimcontent.core.errors import TemplateNotFoundError
from dimcontent.domain import Page, Snippet
from dimcontent.domain.models import DimensionContent, User
from dimcontent.resolver import (
    DimensionContentResolver,
    ExcerptResolver,
    SeoResolver,
    SettingsResolver,
    TemplateResolver,
)
from dimcontent.resolver.values import ContentView


@pytest.fixture
def page_content():
    page = Page(id="home")
    dimension_content = page.create_dimension_content("en")
    dimension_content.template_key = "default"
    dimension_content.template_data = {"title": "Home", "subtitle": "Start"}
    dimension_content.excerpt_title = "Welcome"
    dimension_content.seo_title = "Home | Example"
    dimension_content.available_locales = ["en"]
    dimension_content.main_webspace = "website"
    return dimension_content


def _contents(content_view: ContentView) -> dict:
    return {key: value.content for key, value in content_view.content.items()}


class TestDimensionContentResolver:
    def test_default_id(self, page_content):
        content_view = DimensionContentResolver().resolve(page_content)
        assert content_view.content == {"id": "home"}

    def test_object_paths(self, page_content):
        content_view = DimensionContentResolver().resolve(
            page_content, {"locale": "object.locale", "title": "title", "nope": "object.nope"}
        )
        assert content_view.content == {"id": "home", "locale": "en"}

    def test_empty_properties(self, page_content):
        assert DimensionContentResolver().resolve(page_content, {}) is None


class TestTemplateResolver:
    def test_resolves_template_fields(self, container, page_content):
        resolver = TemplateResolver(container.form_metadata_loader, container.metadata_resolver)
        content_view = resolver.resolve(page_content)

        contents = _contents(content_view)
        assert contents["title"] == "Home"
        # Section fields are flattened
        assert contents["subtitle"] == "Start"
        assert contents["pages"] == []

    def test_properties_filter(self, container, page_content):
        resolver = TemplateResolver(container.form_metadata_loader, container.metadata_resolver)
        content_view = resolver.resolve(page_content, {"headline": "title"})
        assert _contents(content_view) == {"headline": "Home"}

    def test_unknown_template(self, container, page_content):
        page_content.template_key = "missing"
        resolver = TemplateResolver(container.form_metadata_loader, container.metadata_resolver)
        with pytest.raises(TemplateNotFoundError) as exc_info:
            resolver.resolve(page_content)
        assert exc_info.value.context.resource_id == "home"

    def test_untemplated_content(self, container):
        resolver = TemplateResolver(container.form_metadata_loader, container.metadata_resolver)
        assert resolver.resolve(DimensionContent(resource=Page(), locale="en")) is None


class TestExcerptAndSeoResolvers:
    def test_excerpt_prefix_removed(self, container, page_content):
        resolver = ExcerptResolver(container.form_metadata_loader, container.metadata_resolver)
        contents = _contents(resolver.resolve(page_content))
        assert contents["title"] == "Welcome"
        assert "excerpt_title" not in contents

    def test_excerpt_properties(self, container, page_content):
        resolver = ExcerptResolver(container.form_metadata_loader, container.metadata_resolver)
        content_view = resolver.resolve(page_content, {"teaser": "excerpt.title", "title": "title"})
        assert _contents(content_view) == {"teaser": "Welcome"}

    def test_seo_skips_search_result(self, container, page_content):
        resolver = SeoResolver(container.form_metadata_loader, container.metadata_resolver)
        contents = _contents(resolver.resolve(page_content))
        assert contents["title"] == "Home | Example"
        assert contents["no_index"] is False
        assert "search_result" not in contents

    def test_snippets_have_no_seo(self, container):
        resolver = SeoResolver(container.form_metadata_loader, container.metadata_resolver)
        assert resolver.resolve(Snippet().create_dimension_content("en")) is None


class TestSettingsResolver:
    def test_page_settings(self, page_content):
        page_content.author = User(id="u1")
        content_view = SettingsResolver().resolve(page_content)

        content = content_view.content
        assert content["available_locales"] == ["en"]
        assert content["main_webspace"] == "website"
        assert content["template"] == "default"
        assert content["shadow_base_locale"] is None
        assert "localizations" not in content
        assert content["author"].content == "u1"
        assert [r.resource_key for r in content["author"].references] == [User.RESOURCE_KEY]

    def test_snippet_settings(self):
        dimension_content = Snippet().create_dimension_content("en")
        dimension_content.template_key = "default"
        content = SettingsResolver().resolve(dimension_content).content
        assert content == {"available_locales": [], "template": "default"}

    def test_localizations(self, imported_contents):
        page = imported_contents.pages.get("home")
        dimension_content = imported_contents.content_aggregator.aggregate(
            page, {"locale": "en", "stage": "draft"}
        )
        resolver = SettingsResolver(imported_contents.route_generator, imported_contents.route_repository)

        content = resolver.resolve(dimension_content).content

        assert content["localizations"] == {
            "de": {"locale": "de", "url": "/de/startseite", "alternate": True},
            "en": {"locale": "en", "url": "/en/home", "alternate": True},
        }
