"""Tests for PropertyResolverProvider and DefaultPropertyResolver."""

import pytest

from dimcontent.core.errors import ConfigError
from dimcontent.properties import (
    DefaultPropertyResolver,
    PropertyResolver,
    PropertyResolverProvider,
    SelectionPropertyResolver,
)


class TestPropertyResolverProvider:
    def test_lookup_by_type(self):
        selection = SelectionPropertyResolver("page_selection", "pages")
        provider = PropertyResolverProvider([DefaultPropertyResolver(), selection])
        assert provider.get("page_selection") is selection
        assert provider.list_types() == ["default", "page_selection"]

    def test_fallback_to_default(self):
        default = DefaultPropertyResolver()
        provider = PropertyResolverProvider([default])
        assert provider.get("text_line") is default

    def test_no_default(self):
        with pytest.raises(ConfigError):
            PropertyResolverProvider().get("text_line")

    def test_register_replaces(self):
        provider = PropertyResolverProvider([SelectionPropertyResolver("page_selection", "pages")])
        replacement = SelectionPropertyResolver("page_selection", "articles")
        provider.register(replacement)
        assert provider.get("page_selection") is replacement


class TestDefaultPropertyResolver:
    def test_passes_value_through(self):
        view = DefaultPropertyResolver().resolve({"a": 1}, "en", {"placeholder": "x"})
        assert view.content == {"a": 1}
        assert view.view == {"placeholder": "x"}

    def test_protocol(self):
        assert isinstance(DefaultPropertyResolver(), PropertyResolver)
