"""
Dimension content domain model.

A *content-rich entity* (a page, a snippet, an article) owns many
*dimension contents*: one variant per ``(locale, stage)`` pair plus one
*unlocalized* variant (``locale=None``) per stage that holds the values
shared by all languages.

Capabilities are expressed as dataclass mixins. A merger, normalizer or
resolver that cares about a capability checks it with ``isinstance``:

    >>> isinstance(dimension_content, Auditable)
    True

Architecture:
    ::

        ContentRichEntity (Page, Snippet)
        └── dimension_contents
            ├── (None, draft)   unlocalized draft
            ├── ("en", draft)   localized draft
            ├── (None, live)    unlocalized live
            └── ("en", live)    localized live

        DimensionContent + capability mixins:
          Auditable · Templated · Excerptable · Seoable · Routable
          NavigationContextual · Authored · Shadowable · Webspaced · Workflowed

Tags:
    domain, dimension-content, localization, stages, dimcontent
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from dimcontent.routing.model import Route

STAGE_DRAFT = "draft"
STAGE_LIVE = "live"
STAGES = (STAGE_DRAFT, STAGE_LIVE)

WORKFLOW_PLACE_UNPUBLISHED = "unpublished"
WORKFLOW_PLACE_DRAFT = "draft"
WORKFLOW_PLACE_PUBLISHED = "published"


# =============================================================================
# Referenced value types
# =============================================================================


@dataclass(eq=False)
class User:
    """Creator, changer or author of a dimension content."""

    RESOURCE_KEY: ClassVar[str] = "users"

    id: int | str
    username: str | None = None


@dataclass(frozen=True)
class Category:
    id: int
    name: str | None = None


@dataclass(frozen=True)
class Tag:
    id: int
    name: str


# =============================================================================
# Entity + base dimension content
# =============================================================================


@dataclass(eq=False, kw_only=True)
class ContentRichEntity:
    """Owner of a set of dimension contents.

    Subclasses set ``resource_key`` and ``dimension_content_class``.
    """

    resource_key: ClassVar[str] = "contents"
    dimension_content_class: ClassVar[type[DimensionContent]]

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    dimension_contents: list[DimensionContent] = field(default_factory=list)
    created: datetime | None = None
    changed: datetime | None = None

    def create_dimension_content(
        self, locale: str | None = None, stage: str = STAGE_DRAFT
    ) -> DimensionContent:
        """Create a detached dimension content of this entity's class."""
        return self.dimension_content_class(resource=self, locale=locale, stage=stage)

    def add_dimension_content(self, dimension_content: DimensionContent) -> None:
        if dimension_content not in self.dimension_contents:
            self.dimension_contents.append(dimension_content)

    def remove_dimension_content(self, dimension_content: DimensionContent) -> None:
        self.dimension_contents = [
            dc for dc in self.dimension_contents if dc is not dimension_content
        ]

    def get_dimension_content(
        self, locale: str | None, stage: str = STAGE_DRAFT
    ) -> DimensionContent | None:
        for dimension_content in self.dimension_contents:
            if dimension_content.locale == locale and dimension_content.stage == stage:
                return dimension_content
        return None

    def get_or_create_dimension_content(
        self, locale: str | None, stage: str = STAGE_DRAFT
    ) -> DimensionContent:
        dimension_content = self.get_dimension_content(locale, stage)
        if dimension_content is None:
            dimension_content = self.create_dimension_content(locale, stage)
            self.add_dimension_content(dimension_content)
        return dimension_content


@dataclass(eq=False, kw_only=True)
class DimensionContent:
    """One ``(locale, stage)`` variant of a content-rich entity."""

    resource: ContentRichEntity
    locale: str | None = None
    stage: str = STAGE_DRAFT
    ghost_locale: str | None = None
    available_locales: list[str] | None = None
    merged: bool = field(default=False, repr=False)

    @property
    def resource_key(self) -> str:
        return self.resource.resource_key

    @property
    def resource_id(self) -> str:
        return self.resource.id

    @property
    def is_localized(self) -> bool:
        return self.locale is not None

    def add_available_locale(self, locale: str) -> None:
        if self.available_locales is None:
            self.available_locales = []
        if locale not in self.available_locales:
            self.available_locales.append(locale)

    def remove_available_locale(self, locale: str) -> None:
        if self.available_locales and locale in self.available_locales:
            self.available_locales.remove(locale)

    def mark_as_merged(self) -> None:
        self.merged = True

    @classmethod
    def default_dimension_attributes(cls) -> dict[str, Any]:
        return {"locale": None, "stage": STAGE_DRAFT}


# =============================================================================
# Capabilities
# =============================================================================


@dataclass(eq=False, kw_only=True)
class Auditable:
    created: datetime | None = None
    changed: datetime | None = None
    creator: User | None = None
    changer: User | None = None


@dataclass(eq=False, kw_only=True)
class Templated:
    template_type: ClassVar[str] = "default"

    template_key: str | None = None
    template_data: dict[str, Any] = field(default_factory=dict)


@dataclass(eq=False, kw_only=True)
class Excerptable:
    excerpt_title: str | None = None
    excerpt_more: str | None = None
    excerpt_description: str | None = None
    excerpt_categories: list[Category] = field(default_factory=list)
    excerpt_tags: list[Tag] = field(default_factory=list)
    excerpt_icon: dict[str, Any] | None = None
    excerpt_image: dict[str, Any] | None = None


@dataclass(eq=False, kw_only=True)
class Seoable:
    seo_title: str | None = None
    seo_description: str | None = None
    seo_keywords: str | None = None
    seo_canonical_url: str | None = None
    seo_no_index: bool = False
    seo_no_follow: bool = False
    seo_hide_in_sitemap: bool = False


@dataclass(eq=False, kw_only=True)
class Routable:
    route: Route | None = None


@dataclass(eq=False, kw_only=True)
class NavigationContextual:
    navigation_contexts: list[str] = field(default_factory=list)


@dataclass(eq=False, kw_only=True)
class Authored:
    author: User | None = None
    authored: datetime | None = None
    last_modified: datetime | None = None


@dataclass(eq=False, kw_only=True)
class Shadowable:
    shadow_locale: str | None = None
    shadow_locales: dict[str, str] | None = None


@dataclass(eq=False, kw_only=True)
class Webspaced:
    main_webspace: str | None = None
    additional_webspaces: list[str] = field(default_factory=list)


@dataclass(eq=False, kw_only=True)
class Workflowed:
    workflow_place: str | None = None
    workflow_published: datetime | None = None


CAPABILITIES: tuple[type, ...] = (
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
)


__all__ = [
    "STAGE_DRAFT",
    "STAGE_LIVE",
    "STAGES",
    "WORKFLOW_PLACE_UNPUBLISHED",
    "WORKFLOW_PLACE_DRAFT",
    "WORKFLOW_PLACE_PUBLISHED",
    "User",
    "Category",
    "Tag",
    "ContentRichEntity",
    "DimensionContent",
    "Auditable",
    "Templated",
    "Excerptable",
    "Seoable",
    "Routable",
    "NavigationContextual",
    "Authored",
    "Shadowable",
    "Webspaced",
    "Workflowed",
    "CAPABILITIES",
]
