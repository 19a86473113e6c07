"""
Smart resolvers: turn a :class:`SmartResolvable` into concrete resolvables.

A smart content property only knows its *filters* (tags, categories,
data source, ...). When its turn in the priority queue comes, the
:class:`SmartContentSmartResolver` asks the matching
:class:`SmartContentProvider` for the ids and returns a content view of
ordinary resolvable resources plus the pagination view.

Tags:
    smart-content, resolver, pagination, dimcontent
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.errors import ResolutionError, SmartResolverNotFoundError
from dimcontent.resolver.values import ContentView, SmartResolvable

SMART_CONTENT_KEY = "smart_content"


@runtime_checkable
class SmartResolver(Protocol):
    key: str

    def resolve(self, resolvable: SmartResolvable, locale: str | None = None) -> ContentView:
        ...


class SmartResolverProvider:
    def __init__(self, smart_resolvers: Iterable[SmartResolver] = ()) -> None:
        self._resolvers: dict[str, SmartResolver] = {}
        for smart_resolver in smart_resolvers:
            self.register(smart_resolver)

    def register(self, smart_resolver: SmartResolver) -> None:
        self._resolvers[smart_resolver.key] = smart_resolver

    def get(self, key: str) -> SmartResolver:
        try:
            return self._resolvers[key]
        except KeyError as exc:
            raise SmartResolverNotFoundError(key, cause=exc) from exc

    def has(self, key: str) -> bool:
        return key in self._resolvers


@runtime_checkable
class SmartContentProvider(Protocol):
    """Finds the items matching smart content filters."""

    resource_loader_key: str

    def find_flat_by(
        self,
        filters: Mapping[str, Any],
        sort_bys: Mapping[str, str] | None,
        params: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        """Return the matching items; each has at least an ``id``."""
        ...

    def count_by(self, filters: Mapping[str, Any], params: Mapping[str, Any]) -> int:
        ...


class SmartContentSmartResolver:
    key = SMART_CONTENT_KEY

    def __init__(self, smart_content_providers: Mapping[str, SmartContentProvider]) -> None:
        self._providers = dict(smart_content_providers)

    def resolve(self, resolvable: SmartResolvable, locale: str | None = None) -> ContentView:
        data = resolvable.data
        value = data["value"]
        filters = data["filters"]
        sort_bys = data["sort_bys"]
        parameters = data["parameters"]

        limit = filters.get("limit")
        page = filters["page"]

        provider_key = parameters.get("provider")
        if not isinstance(provider_key, str):
            raise ResolutionError(
                f'The "provider" must be a string, {type(provider_key).__name__} given.'
            )
        provider = self._providers.get(provider_key)
        if provider is None:
            raise ResolutionError(
                f'No smart content provider found for key "{provider_key}". '
                f"Existing keys: {', '.join(sorted(self._providers))}"
            ).with_context(loader_key=provider_key)

        params = {"value": value, **parameters}
        items = provider.find_flat_by(filters, sort_bys, params)
        if limit and len(items) <= limit:
            total = len(items)
        else:
            total = provider.count_by(filters, params)

        view = {
            "data_source": filters.get("data_source"),
            "include_sub_folders": filters.get("include_sub_folders"),
            "categories": filters.get("categories"),
            "category_operator": filters.get("category_operator"),
            "tags": value.get("tags", []),
            "tag_operator": filters.get("tag_operator"),
            "types": value.get("types", []),
            "types_operator": filters.get("types_operator"),
            "website_categories": filters.get("website_categories"),
            "website_category_operator": filters.get("website_category_operator"),
            "category_root": parameters.get("category_root"),
            "website_tags": filters.get("website_tags"),
            "website_tag_operator": filters.get("website_tag_operator"),
            "sort_bys": sort_bys,
            "present_as": value.get("present_as"),
            "limit_result": limit,
            "page": page,
            "has_next_page": limit is not None and total > limit * page,
            "paginated": limit is not None,
            "total": total,
            "max_page": math.ceil(total / limit) if limit else None,
            "limit": limit,
            "excluded": [],
        }

        return ContentView.create_resolvables(
            [item["id"] for item in items], provider.resource_loader_key, view
        )


__all__ = [
    "SMART_CONTENT_KEY",
    "SmartContentProvider",
    "SmartContentSmartResolver",
    "SmartResolver",
    "SmartResolverProvider",
]
