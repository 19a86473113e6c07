"""
Merger contract and the ordered merge pipeline.

A merger copies one capability's attributes from a *source* dimension
content onto a *target*. It only acts when both objects have that
capability; otherwise it is a no-op. :class:`ContentMerger` applies a
registration list of mergers in order.

Examples:
    >>> merger = ContentMerger([AuditableMerger(), TemplateMerger()])
    >>> merger.merge(target, unlocalized)
    >>> merger.merge(target, localized)   # localized values win

Tags:
    merger, pipeline, dimension-content, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dimcontent.core.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Merger(Protocol):
    """Copies one capability from ``source`` onto ``target``."""

    def merge(self, target: object, source: object) -> None:
        ...


class ContentMerger:
    """Applies every registered merger in registration order."""

    def __init__(self, mergers: Iterable[Merger]) -> None:
        self._mergers = list(mergers)

    @property
    def mergers(self) -> list[Merger]:
        return list(self._mergers)

    def merge(self, target: object, source: object) -> None:
        for merger in self._mergers:
            merger.merge(target, source)
        logger.debug(
            "dimension_content_merged",
            target=type(target).__name__,
            mergers=len(self._mergers),
        )


__all__ = ["Merger", "ContentMerger"]
