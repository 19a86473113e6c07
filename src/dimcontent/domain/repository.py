"""
Content repository contract and an in-memory implementation.

Resource loaders ask a repository for content-rich entities by id; the
repository never resolves dimensions itself (that is the aggregator's job).

Tags:
    repository, content, in-memory, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dimcontent.core.errors import ContentNotFoundError
from dimcontent.domain.models import ContentRichEntity


@runtime_checkable
class ContentRepository(Protocol):
    """Lookup of content-rich entities by id."""

    def add(self, entity: ContentRichEntity) -> None:
        ...

    def get(self, entity_id: str) -> ContentRichEntity:
        """Return the entity or raise :class:`ContentNotFoundError`."""
        ...

    def find_by_ids(self, ids: Iterable[str]) -> list[ContentRichEntity]:
        """Return the entities that exist, in the order of ``ids``."""
        ...

    def remove(self, entity_id: str) -> None:
        ...


class InMemoryContentRepository:
    """Dict-backed :class:`ContentRepository` for one resource key."""

    def __init__(
        self, resource_key: str, entities: Iterable[ContentRichEntity] = ()
    ) -> None:
        self.resource_key = resource_key
        self._entities: dict[str, ContentRichEntity] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: ContentRichEntity) -> None:
        self._entities[entity.id] = entity

    def get(self, entity_id: str) -> ContentRichEntity:
        try:
            return self._entities[entity_id]
        except KeyError as exc:
            raise ContentNotFoundError(
                f'No "{self.resource_key}" entity with id "{entity_id}"', cause=exc
            ).with_context(resource_key=self.resource_key, resource_id=entity_id) from exc

    def find_by_ids(self, ids: Iterable[str]) -> list[ContentRichEntity]:
        return [self._entities[str(i)] for i in ids if str(i) in self._entities]

    def remove(self, entity_id: str) -> None:
        self._entities.pop(entity_id, None)

    def __len__(self) -> int:
        return len(self._entities)


__all__ = ["ContentRepository", "InMemoryContentRepository"]
