"""Loads the resolvables of one priority level, grouped by loader key."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dimcontent.core.errors import ResourceLoaderNotFoundError
from dimcontent.core.logging import get_logger
from dimcontent.resolver.queue import ResourcesToLoad
from dimcontent.resolver.values import ResolvableResource, SmartResolvable

if TYPE_CHECKING:
    from dimcontent.resources.base import ResourceLoaderProvider
    from dimcontent.resources.smart import SmartResolverProvider

logger = get_logger(__name__)

LoadedResources = dict[str, dict[Any, dict[str, Any]]]


class ResolvableResourceLoader:
    def __init__(
        self,
        resource_loader_provider: ResourceLoaderProvider,
        smart_resolver_provider: SmartResolverProvider,
    ) -> None:
        self._resource_loader_provider = resource_loader_provider
        self._smart_resolver_provider = smart_resolver_provider

    def load_resources(
        self, resources_per_loader: ResourcesToLoad, locale: str | None
    ) -> LoadedResources:
        """Load every resolvable; the result is keyed ``loader -> id -> metadata id``.

        Ids a loader does not find are missing from the result.
        """
        loaded: LoadedResources = {}
        for loader_key, resources in resources_per_loader.items():
            if not loader_key:
                raise ResourceLoaderNotFoundError(str(loader_key))

            smart_resolvables: dict[Any, SmartResolvable] = {}
            resolvables: dict[Any, ResolvableResource] = {}
            metadata_identifiers: dict[Any, list[str]] = {}
            for resource_id, by_metadata in resources.items():
                for metadata_identifier, resolvable in by_metadata.items():
                    metadata_identifiers.setdefault(resource_id, []).append(metadata_identifier)
                    if isinstance(resolvable, SmartResolvable):
                        smart_resolvables[resource_id] = resolvable
                    else:
                        resolvables[resource_id] = resolvable

            results: dict[Any, Any] = {}
            if smart_resolvables:
                results.update(self._load_smart_resolvables(smart_resolvables, locale))
            if resolvables:
                results.update(self._load_resolvables(resolvables, loader_key, locale))

            for resource_id, resource in results.items():
                for metadata_identifier in metadata_identifiers.get(resource_id, []):
                    loaded.setdefault(loader_key, {}).setdefault(resource_id, {})[
                        metadata_identifier
                    ] = resource

            logger.debug(
                "resolvables_loaded",
                loader_key=loader_key,
                requested=len(resources),
                found=len(results),
            )

        return loaded

    def _load_smart_resolvables(
        self, smart_resolvables: dict[Any, SmartResolvable], locale: str | None
    ) -> dict[Any, Any]:
        return {
            resource_id: self._smart_resolver_provider.get(resolvable.resource_loader_key).resolve(
                resolvable, locale
            )
            for resource_id, resolvable in smart_resolvables.items()
        }

    def _load_resolvables(
        self, resolvables: dict[Any, ResolvableResource], loader_key: str, locale: str | None
    ) -> dict[Any, Any]:
        resource_loader = self._resource_loader_provider.get(loader_key)
        if resource_loader is None:
            raise ResourceLoaderNotFoundError(loader_key)

        return resource_loader.load([r.id for r in resolvables.values()], locale)


__all__ = ["LoadedResources", "ResolvableResourceLoader"]
