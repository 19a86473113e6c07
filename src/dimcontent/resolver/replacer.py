"""Replaces resolvables in resolved content with their loaded values."""

from __future__ import annotations

from typing import Any

from dimcontent.httpcache.reference_store import ReferenceStore
from dimcontent.resolver.values import ResolvableResource, SmartResolvable


class ResolvableResourceReplacer:
    def __init__(self, reference_store: ReferenceStore) -> None:
        self._reference_store = reference_store

    def replace_resolvable_resources_with_resolved_values(
        self,
        content: Any,
        resolved_resources: dict[str, dict[Any, dict[str, Any]]],
        depth: int,
        max_depth: int,
    ) -> Any:
        """Replace resolvables in ``content``, repeating one level deeper while anything changes.

        Resolvables nothing was loaded for get ``None`` passed to their callback.
        Beyond ``max_depth`` the remaining resource placeholders become ``None``.
        """
        if depth > max_depth:
            return _walk(content, lambda value: None if isinstance(value, ResolvableResource) else value)

        replaced = False

        def replace(value: Any) -> Any:
            nonlocal replaced
            if not isinstance(value, (ResolvableResource, SmartResolvable)):
                return value

            resource = (
                resolved_resources.get(value.resource_loader_key, {})
                .get(value.id, {})
                .get(value.metadata_identifier)
            )
            if (
                resource is not None
                and isinstance(value, ResolvableResource)
                and value.resource_key
            ):
                self._reference_store.add(str(value.id), value.resource_key)

            replaced = True
            return value.execute_callback(resource)

        content = _walk(content, replace)
        if replaced:
            content = self.replace_resolvable_resources_with_resolved_values(
                content, resolved_resources, depth + 1, max_depth
            )
        return content


def _walk(value: Any, replace: Any) -> Any:
    # Values inside replaced values are not visited in the same pass
    if isinstance(value, dict):
        return {key: _walk(item, replace) for key, item in value.items()}
    if isinstance(value, list):
        return [_walk(item, replace) for item in value]
    return replace(value)


__all__ = ["ResolvableResourceReplacer"]
