"""
Resource loaders: batch lookup of referenced resources by id.

A resolvable resource names a *loader key* (``pages``, ``snippets``,
``media``, ...). The :class:`ResourceLoaderProvider` maps loader keys to
loaders; the content resolver loads every id of one key in a single call.

Architecture:
    ::

        ResourceLoaderProvider
        ├── "pages"    → CachedResourceLoader(ContentResourceLoader(pages repo))
        ├── "snippets" → CachedResourceLoader(ContentResourceLoader(snippets repo))
        └── ...

        load(ids, locale, params) → {id: resource}   (missing ids are omitted)

Tags:
    resources, loader, registry, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from dimcontent.domain.repository import ContentRepository


@runtime_checkable
class ResourceLoader(Protocol):
    key: str

    def load(
        self, ids: Iterable[int | str], locale: str | None, params: Mapping[str, Any] | None = None
    ) -> dict[int | str, Any]:
        """Return the found resources keyed by id; missing ids are omitted."""
        ...


class ResourceLoaderProvider:
    """Registry of resource loaders by loader key."""

    def __init__(self, resource_loaders: Iterable[ResourceLoader] = ()) -> None:
        self._loaders: dict[str, ResourceLoader] = {}
        for resource_loader in resource_loaders:
            self.register(resource_loader)

    def register(self, resource_loader: ResourceLoader, key: str | None = None) -> None:
        self._loaders[key or resource_loader.key] = resource_loader

    def get(self, key: str) -> ResourceLoader | None:
        return self._loaders.get(key)

    def has(self, key: str) -> bool:
        return key in self._loaders

    def list_keys(self) -> list[str]:
        return sorted(self._loaders)


class ContentResourceLoader:
    """Loads content-rich entities from a repository.

    The entities are returned as they are; the content resolver aggregates
    and resolves them in the requested locale.
    """

    def __init__(self, repository: ContentRepository, key: str) -> None:
        self._repository = repository
        self.key = key

    def load(
        self, ids: Iterable[int | str], locale: str | None, params: Mapping[str, Any] | None = None
    ) -> dict[int | str, Any]:
        ids = list(ids)
        entities = {entity.id: entity for entity in self._repository.find_by_ids(str(i) for i in ids)}
        return {resource_id: entities[str(resource_id)] for resource_id in ids if str(resource_id) in entities}


__all__ = ["ContentResourceLoader", "ResourceLoader", "ResourceLoaderProvider"]
