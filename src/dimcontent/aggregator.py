"""
Builds one merged dimension content out of an entity's variants.

The unlocalized variant of the stage is merged first, the localized one on
top, onto a fresh object created by the entity. The variants stored on the
entity are never modified.

When the requested locale does not exist the entity's *ghost locale* (the
locale it was first created in, kept on the unlocalized variant) or its
first available locale is used instead and recorded as ``ghost_locale`` on
the merged object.

Tags:
    aggregator, merger, localization, dimcontent
"""

from __future__ import annotations

from typing import Any

from dimcontent.core.errors import ContentNotFoundError
from dimcontent.core.logging import get_logger
from dimcontent.domain.collection import DimensionContentCollection
from dimcontent.domain.models import ContentRichEntity, DimensionContent
from dimcontent.merger.base import ContentMerger

logger = get_logger(__name__)


class ContentAggregator:
    def __init__(self, content_merger: ContentMerger) -> None:
        self._content_merger = content_merger

    def aggregate(
        self, entity: ContentRichEntity, dimension_attributes: dict[str, Any]
    ) -> DimensionContent:
        dimension_attributes = {
            **entity.dimension_content_class.default_dimension_attributes(),
            **dimension_attributes,
        }
        collection = self._load(entity, dimension_attributes)

        ghost_locale = None
        requested_locale = dimension_attributes["locale"]
        if requested_locale is not None and collection.get_localized_dimension_content() is None:
            ghost_locale = self._fallback_locale(collection, requested_locale)
            if ghost_locale is None:
                raise self._not_found(entity, dimension_attributes)
            collection = self._load(entity, {**dimension_attributes, "locale": ghost_locale})
            if collection.get_localized_dimension_content() is None:
                raise self._not_found(entity, dimension_attributes)

        merged = self.merge(entity, collection)
        if ghost_locale is not None:
            merged.ghost_locale = ghost_locale

        logger.debug(
            "dimension_content_aggregated",
            resource_key=entity.resource_key,
            resource_id=entity.id,
            locale=merged.locale,
            stage=merged.stage,
            ghost_locale=ghost_locale,
        )
        return merged

    def merge(
        self, entity: ContentRichEntity, collection: DimensionContentCollection
    ) -> DimensionContent:
        """Merge the variants of ``collection`` in order onto a new object."""
        if collection.get_unlocalized_dimension_content() is None:
            raise self._not_found(entity, collection.dimension_attributes)

        merged = entity.create_dimension_content()
        merged.mark_as_merged()
        for dimension_content in collection:
            self._content_merger.merge(merged, dimension_content)
            merged.locale = dimension_content.locale
            merged.stage = dimension_content.stage

        return merged

    @staticmethod
    def _load(
        entity: ContentRichEntity, dimension_attributes: dict[str, Any]
    ) -> DimensionContentCollection:
        return DimensionContentCollection(
            entity.dimension_contents, dimension_attributes, entity.dimension_content_class
        )

    @staticmethod
    def _fallback_locale(collection: DimensionContentCollection, requested: str) -> str | None:
        unlocalized = collection.get_unlocalized_dimension_content()
        if unlocalized is None:
            return None
        if unlocalized.ghost_locale and unlocalized.ghost_locale != requested:
            return unlocalized.ghost_locale
        for locale in unlocalized.available_locales or []:
            if locale != requested:
                return locale
        return None

    @staticmethod
    def _not_found(
        entity: ContentRichEntity, dimension_attributes: dict[str, Any]
    ) -> ContentNotFoundError:
        return ContentNotFoundError(
            f'No dimension content of "{entity.resource_key}" "{entity.id}" matches '
            f"{dimension_attributes}"
        ).with_context(
            resource_key=entity.resource_key,
            resource_id=entity.id,
            locale=dimension_attributes.get("locale"),
            stage=dimension_attributes.get("stage"),
        )


__all__ = ["ContentAggregator"]
