"""Data mappers for the plain capability fields (navigation, excerpt, seo).

These only write keys present in the incoming data, always onto the
localized variant.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from dimcontent.domain.models import (
    Category,
    DimensionContent,
    Excerptable,
    NavigationContextual,
    Seoable,
    Tag,
)


def _set_present(target: object, data: dict[str, Any], *keys: str) -> None:
    for key in keys:
        if key in data:
            setattr(target, key, data[key])


class NavigationContextDataMapper:
    def map(
        self, unlocalized: DimensionContent, localized: DimensionContent, data: dict[str, Any]
    ) -> None:
        if not isinstance(localized, NavigationContextual):
            return
        if "navigation_contexts" in data:
            localized.navigation_contexts = list(data["navigation_contexts"] or [])


class TagFactory(Protocol):
    def get_or_create(self, names: Iterable[str]) -> list[Tag]:
        ...


class InMemoryTagFactory:
    """Hands out one :class:`Tag` per name with incrementing ids."""

    def __init__(self) -> None:
        self._tags: dict[str, Tag] = {}

    def get_or_create(self, names: Iterable[str]) -> list[Tag]:
        tags = []
        for name in names:
            if name not in self._tags:
                self._tags[name] = Tag(id=len(self._tags) + 1, name=name)
            tags.append(self._tags[name])
        return tags


class ExcerptDataMapper:
    def __init__(self, tag_factory: TagFactory | None = None) -> None:
        self._tag_factory = tag_factory or InMemoryTagFactory()

    def map(
        self, unlocalized: DimensionContent, localized: DimensionContent, data: dict[str, Any]
    ) -> None:
        if not isinstance(localized, Excerptable):
            return

        _set_present(
            localized,
            data,
            "excerpt_title",
            "excerpt_more",
            "excerpt_description",
            "excerpt_icon",
            "excerpt_image",
        )
        if "excerpt_categories" in data:
            localized.excerpt_categories = [
                Category(id=category_id) for category_id in data["excerpt_categories"] or []
            ]
        if "excerpt_tags" in data:
            localized.excerpt_tags = self._tag_factory.get_or_create(data["excerpt_tags"] or [])


class SeoDataMapper:
    def map(
        self, unlocalized: DimensionContent, localized: DimensionContent, data: dict[str, Any]
    ) -> None:
        if not isinstance(localized, Seoable):
            return

        _set_present(
            localized,
            data,
            "seo_title",
            "seo_description",
            "seo_keywords",
            "seo_canonical_url",
        )
        for flag in ("seo_no_index", "seo_no_follow", "seo_hide_in_sitemap"):
            if flag in data:
                setattr(localized, flag, bool(data[flag]))


__all__ = [
    "ExcerptDataMapper",
    "InMemoryTagFactory",
    "NavigationContextDataMapper",
    "SeoDataMapper",
    "TagFactory",
]
