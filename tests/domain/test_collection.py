"""Tests for DimensionContentCollection."""

from dimcontent.domain import STAGE_DRAFT, STAGE_LIVE, DimensionContentCollection, Page, PageDimensionContent


def _page() -> Page:
    page = Page(id="1")
    for locale in (None, "en", "de"):
        for stage in (STAGE_DRAFT, STAGE_LIVE):
            page.get_or_create_dimension_content(locale, stage)
    return page


class TestDimensionContentCollection:
    def test_unlocalized_then_localized(self):
        """The unlocalized variant always comes first."""
        page = _page()
        collection = DimensionContentCollection(
            reversed(page.dimension_contents), {"locale": "de", "stage": STAGE_LIVE}, PageDimensionContent
        )
        variants = list(collection)
        assert len(collection) == 2
        assert variants[0] is page.get_dimension_content(None, STAGE_LIVE)
        assert variants[1] is page.get_dimension_content("de", STAGE_LIVE)

    def test_without_locale_only_unlocalized(self):
        page = _page()
        collection = DimensionContentCollection(
            page.dimension_contents, {"stage": STAGE_DRAFT}, PageDimensionContent
        )
        assert list(collection) == [page.get_dimension_content(None, STAGE_DRAFT)]
        assert collection.get_localized_dimension_content() is None

    def test_missing_locale(self):
        collection = DimensionContentCollection(
            _page().dimension_contents, {"locale": "fr", "stage": STAGE_DRAFT}, PageDimensionContent
        )
        assert collection.get_localized_dimension_content() is None
        assert collection.get_unlocalized_dimension_content() is not None
        assert len(collection) == 1

    def test_empty(self):
        collection = DimensionContentCollection([], {"locale": "en", "stage": STAGE_DRAFT}, PageDimensionContent)
        assert list(collection) == []
        assert len(collection) == 0

    def test_attributes_are_defaulted(self):
        collection = DimensionContentCollection([], {"locale": "en"}, PageDimensionContent)
        assert collection.dimension_attributes == {"locale": "en", "stage": STAGE_DRAFT}
        assert collection.dimension_content_class is PageDimensionContent
