"""Resolves the items of a form against a data mapping, one content view per field."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dimcontent.core.errors import InvalidOptionError
from dimcontent.metadata.model import FieldMetadata, ItemMetadata, OptionMetadata, SectionMetadata
from dimcontent.properties.base import PropertyResolverProvider
from dimcontent.resolver.values import ContentView


class MetadataResolver:
    def __init__(self, property_resolver_provider: PropertyResolverProvider) -> None:
        self._provider = property_resolver_provider

    def resolve_items(
        self, items: Mapping[str, ItemMetadata], data: Mapping[str, Any], locale: str
    ) -> dict[str, ContentView]:
        """Resolve every field of ``items``; sections are flattened away."""
        content_views: dict[str, ContentView] = {}
        for name, item in items.items():
            if isinstance(item, SectionMetadata):
                content_views.update(self.resolve_items(item.items, data, locale))
                continue

            params = self.serialize_options(item) if isinstance(item, FieldMetadata) else {}
            resolver = self._provider.get(item.type)
            content_views[name] = resolver.resolve(
                data.get(name),
                locale,
                params,
                metadata=item if isinstance(item, FieldMetadata) else None,
            )

        return content_views

    def serialize_options(self, field: FieldMetadata) -> dict[str, Any]:
        return {str(option.name): self._serialize_option(option) for option in field.options}

    def _serialize_option(self, option: OptionMetadata) -> Any:
        if option.type == OptionMetadata.TYPE_COLLECTION:
            if not isinstance(option.value, list):
                raise InvalidOptionError(
                    f'The value of option "{option.name}" from type {option.type}, '
                    f"must be a list, {type(option.value).__name__} given."
                )
            return {value.name: self._serialize_option(value) for value in option.value}

        return option.value if option.value is not None else option.name


__all__ = ["MetadataResolver"]
