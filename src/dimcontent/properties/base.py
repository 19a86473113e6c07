"""
Property resolvers: turn the raw value of one template field into a content view.

Each field type (``text_line``, ``block``, ``page_selection``,
``smart_content``, ...) has one resolver. Types without a dedicated
resolver use the ``default`` one, which passes the value through.

Architecture:
    ::

        MetadataResolver.resolve_items(items, data, locale)
        └── for each field: PropertyResolverProvider.get(field.type)
                            .resolve(value, locale, params=<options>, metadata=field)

        PropertyResolverProvider
        ├── "default"         → DefaultPropertyResolver
        ├── "block"           → BlockPropertyResolver
        ├── "page_selection"  → SelectionPropertyResolver
        ├── "single_page_selection" → SingleSelectionPropertyResolver
        └── "smart_content"   → SmartContentPropertyResolver

Tags:
    properties, resolver, registry, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.errors import ConfigError
from dimcontent.metadata.model import FieldMetadata
from dimcontent.resolver.values import ContentView

DEFAULT_TYPE = "default"


@runtime_checkable
class PropertyResolver(Protocol):
    type: str

    def resolve(
        self,
        data: Any,
        locale: str,
        params: Mapping[str, Any] | None = None,
        metadata: FieldMetadata | None = None,
    ) -> ContentView:
        ...


class PropertyResolverProvider:
    """Property resolvers by field type, falling back to ``default``."""

    def __init__(self, property_resolvers: Iterable[PropertyResolver] = ()) -> None:
        self._resolvers: dict[str, PropertyResolver] = {}
        for property_resolver in property_resolvers:
            self.register(property_resolver)

    def register(self, property_resolver: PropertyResolver) -> None:
        self._resolvers[property_resolver.type] = property_resolver

    def get(self, type_: str) -> PropertyResolver:
        resolver = self._resolvers.get(type_) or self._resolvers.get(DEFAULT_TYPE)
        if resolver is None:
            raise ConfigError(f'No property resolver for type "{type_}" and no "{DEFAULT_TYPE}" resolver registered')
        return resolver

    def list_types(self) -> list[str]:
        return sorted(self._resolvers)


class DefaultPropertyResolver:
    type = DEFAULT_TYPE

    def resolve(
        self,
        data: Any,
        locale: str,
        params: Mapping[str, Any] | None = None,
        metadata: FieldMetadata | None = None,
    ) -> ContentView:
        return ContentView.create(data, dict(params or {}))


__all__ = [
    "DEFAULT_TYPE",
    "DefaultPropertyResolver",
    "PropertyResolver",
    "PropertyResolverProvider",
]
