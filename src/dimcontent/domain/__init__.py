"""Dimension content domain: entities, capabilities, collections and repositories."""

from dimcontent.domain.collection import DimensionContentCollection
from dimcontent.domain.contents import (
    Page,
    PageDimensionContent,
    Snippet,
    SnippetDimensionContent,
)
from dimcontent.domain.models import (
    STAGE_DRAFT,
    STAGE_LIVE,
    Auditable,
    Authored,
    Category,
    ContentRichEntity,
    DimensionContent,
    Excerptable,
    NavigationContextual,
    Routable,
    Seoable,
    Shadowable,
    Tag,
    Templated,
    User,
    Webspaced,
    Workflowed,
)
from dimcontent.domain.repository import ContentRepository, InMemoryContentRepository

__all__ = [
    "STAGE_DRAFT",
    "STAGE_LIVE",
    "Auditable",
    "Authored",
    "Category",
    "ContentRepository",
    "ContentRichEntity",
    "DimensionContent",
    "DimensionContentCollection",
    "Excerptable",
    "InMemoryContentRepository",
    "NavigationContextual",
    "Page",
    "PageDimensionContent",
    "Routable",
    "Seoable",
    "Shadowable",
    "Snippet",
    "SnippetDimensionContent",
    "Tag",
    "Templated",
    "User",
    "Webspaced",
    "Workflowed",
]
