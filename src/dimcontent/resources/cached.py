"""Memoizing decorator around a resource loader, reset per request."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Mapping
from typing import Any

from dimcontent.core.cache import CacheBackend, InMemoryCache
from dimcontent.core.logging import get_logger
from dimcontent.resources.base import ResourceLoader

logger = get_logger(__name__)


class CachedResourceLoader:
    def __init__(self, resource_loader: ResourceLoader, cache: CacheBackend | None = None) -> None:
        self._resource_loader = resource_loader
        self._cache = cache if cache is not None else InMemoryCache()
        self.key = resource_loader.key

    def load(
        self, ids: Iterable[int | str], locale: str | None, params: Mapping[str, Any] | None = None
    ) -> dict[int | str, Any]:
        params = dict(params or {})
        result: dict[int | str, Any] = {}
        uncached: list[int | str] = []
        cache_hits = 0

        for resource_id in ids:
            cache_key = self._cache_key(resource_id, locale, params)
            if not self._cache.exists(cache_key):
                uncached.append(resource_id)
                continue
            result[resource_id] = self._cache.get(cache_key)
            cache_hits += 1

        if uncached:
            loaded = self._resource_loader.load(uncached, locale, params)
            for resource_id, resource in loaded.items():
                self._cache.set(self._cache_key(resource_id, locale, params), resource)
                result[resource_id] = resource

        logger.debug(
            "resources_loaded",
            loader_key=self.key,
            cache_hits=cache_hits,
            loaded=len(uncached),
        )
        return result

    def reset(self) -> None:
        self._cache.clear()

    @staticmethod
    def _cache_key(resource_id: int | str, locale: str | None, params: dict[str, Any]) -> str:
        payload = json.dumps(
            {"id": resource_id, "locale": locale, "params": params}, sort_keys=True, default=str
        )
        return hashlib.md5(payload.encode()).hexdigest()


__all__ = ["CachedResourceLoader"]
