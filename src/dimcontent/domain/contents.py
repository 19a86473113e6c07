"""Concrete content-rich entities shipped with dimcontent: pages and snippets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from dimcontent.domain.models import (
    Auditable,
    Authored,
    ContentRichEntity,
    DimensionContent,
    Excerptable,
    NavigationContextual,
    Routable,
    Seoable,
    Shadowable,
    Templated,
    Webspaced,
    Workflowed,
)


@dataclass(eq=False, kw_only=True)
class PageDimensionContent(
    DimensionContent,
    Auditable,
    Templated,
    Excerptable,
    Seoable,
    Routable,
    NavigationContextual,
    Authored,
    Shadowable,
    Webspaced,
    Workflowed,
):
    template_type: ClassVar[str] = "page"


@dataclass(eq=False, kw_only=True)
class Page(ContentRichEntity):
    resource_key: ClassVar[str] = "pages"
    dimension_content_class: ClassVar[type[DimensionContent]] = PageDimensionContent

    webspace_key: str | None = None
    parent_id: str | None = None


@dataclass(eq=False, kw_only=True)
class SnippetDimensionContent(
    DimensionContent,
    Auditable,
    Templated,
    Excerptable,
    Workflowed,
):
    template_type: ClassVar[str] = "snippet"


@dataclass(eq=False, kw_only=True)
class Snippet(ContentRichEntity):
    resource_key: ClassVar[str] = "snippets"
    dimension_content_class: ClassVar[type[DimensionContent]] = SnippetDimensionContent


__all__ = [
    "Page",
    "PageDimensionContent",
    "Snippet",
    "SnippetDimensionContent",
]
