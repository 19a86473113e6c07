"""Collects the resources a response was built from, as http cache tags."""

from __future__ import annotations

import uuid


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


class ReferenceStore:
    """Resource references per resource key, reset for every request.

    Examples:
        >>> store = ReferenceStore()
        >>> store.add("12", "media")
        >>> store.add("12", "media")
        >>> store.get_all()
        ['media-12']
    """

    def __init__(self) -> None:
        self._references: dict[str, list[str]] = {}

    def add(self, resource_id: str, resource_key: str) -> None:
        ids = self._references.setdefault(resource_key, [])
        if resource_id not in ids:
            ids.append(resource_id)

    def get_all(self) -> list[str]:
        """Return the cache tags: uuids as they are, other ids prefixed with their resource key."""
        tags: dict[str, None] = {}
        for resource_key, ids in self._references.items():
            for resource_id in ids:
                tag = resource_id if _is_uuid(resource_id) else f"{resource_key}-{resource_id}"
                tags[tag] = None
        return list(tags)

    def reset(self) -> None:
        self._references = {}


__all__ = ["ReferenceStore"]
