"""Tests for the capability mergers and the merge pipeline."""

from datetime import datetime

from dimcontent.domain import Page, Snippet, User
from dimcontent.domain.models import Category
from dimcontent.merger import (
    AuditableMerger,
    ContentMerger,
    DimensionContentMerger,
    ExcerptMerger,
    Merger,
    RoutableMerger,
    SeoMerger,
    TemplateMerger,
    WebspaceMerger,
    default_mergers,
)


class Recorder:
    def __init__(self, name: str, calls: list[str]) -> None:
        self.name = name
        self.calls = calls

    def merge(self, target: object, source: object) -> None:
        self.calls.append(self.name)


class TestContentMerger:
    def test_applies_in_registration_order(self):
        calls: list[str] = []
        merger = ContentMerger([Recorder("a", calls), Recorder("b", calls), Recorder("c", calls)])
        merger.merge(object(), object())
        assert calls == ["a", "b", "c"]

    def test_default_mergers(self):
        mergers = default_mergers()
        assert isinstance(mergers[0], DimensionContentMerger)
        assert all(isinstance(m, Merger) for m in mergers)
        assert len(ContentMerger(mergers).mergers) == len(mergers)


class TestCapabilityMergers:
    def test_no_op_without_capability(self):
        """A snippet has no Seoable capability; SeoMerger leaves it alone."""
        source = Page().create_dimension_content()
        source.seo_title = "SEO"
        target = Snippet().create_dimension_content()
        SeoMerger().merge(target, source)
        assert not hasattr(target, "seo_title")

    def test_dimension_content_merger(self):
        target = Page().create_dimension_content()
        source = Page().create_dimension_content()
        source.available_locales = ["en", "de"]
        source.ghost_locale = "en"
        DimensionContentMerger().merge(target, source)
        assert target.available_locales == ["en", "de"]
        assert target.available_locales is not source.available_locales
        assert target.ghost_locale == "en"

    def test_auditable_copies_users_only_when_set(self):
        creator = User(id=1)
        target = Page().create_dimension_content()
        target.creator = creator
        source = Page().create_dimension_content()
        source.changed = datetime(2024, 1, 2)
        AuditableMerger().merge(target, source)
        assert target.creator is creator
        assert target.changed == datetime(2024, 1, 2)

    def test_template_data_is_merged_key_wise(self):
        target = Page().create_dimension_content()
        unlocalized = Page().create_dimension_content()
        unlocalized.template_key = "default"
        unlocalized.template_data = {"teaser": "shared", "title": "unlocalized"}
        localized = Page().create_dimension_content("en")
        localized.template_data = {"title": "Home"}

        merger = TemplateMerger()
        merger.merge(target, unlocalized)
        merger.merge(target, localized)

        assert target.template_key == "default"
        assert target.template_data == {"teaser": "shared", "title": "Home"}

    def test_unset_values_do_not_overwrite(self):
        target = Page().create_dimension_content()
        target.excerpt_title = "Kept"
        target.excerpt_categories = [Category(id=1)]
        ExcerptMerger().merge(target, Page().create_dimension_content())
        assert target.excerpt_title == "Kept"
        assert target.excerpt_categories == [Category(id=1)]

    def test_routable(self):
        target = Page().create_dimension_content()
        source = Page().create_dimension_content()
        route = object()
        source.route = route
        RoutableMerger().merge(target, source)
        assert target.route is route
        RoutableMerger().merge(target, Page().create_dimension_content())
        assert target.route is route

    def test_webspace(self):
        target = Page().create_dimension_content()
        source = Page().create_dimension_content()
        source.main_webspace = "website"
        source.additional_webspaces = ["blog"]
        WebspaceMerger().merge(target, source)
        assert target.main_webspace == "website"
        assert target.additional_webspaces == ["blog"]
