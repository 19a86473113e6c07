"""
Block visitors: decide per block whether it is rendered.

Each visitor gets the raw block (``{"type": ..., "settings": {...}, ...}``)
and returns it unchanged or ``None`` to drop it. The chain stops at the
first ``None``.

Settings that are not a mapping never drop a block.

Examples:
    >>> chain = BlockVisitorChain([HiddenBlockVisitor()])
    >>> chain.visit({"type": "text", "settings": {"hidden": True}}) is None
    True
    >>> chain.visit({"type": "text", "settings": []})
    {'type': 'text', 'settings': []}

Tags:
    blocks, visitor, segments, audience-targeting, dimcontent
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.logging import get_logger
from dimcontent.routing.generator import SITE_PARAMETER, RequestContext

logger = get_logger(__name__)

SEGMENT_PARAMETER = "segment"
TARGET_GROUP_PARAMETER = "target_group"


@runtime_checkable
class BlockVisitor(Protocol):
    def visit(self, block: dict[str, Any]) -> dict[str, Any] | None:
        ...


def _settings(block: Mapping[str, Any]) -> Mapping[str, Any] | None:
    settings = block.get("settings")
    return settings if isinstance(settings, Mapping) else None


class HiddenBlockVisitor:
    def visit(self, block: dict[str, Any]) -> dict[str, Any] | None:
        settings = _settings(block)
        if settings is not None and settings.get("hidden"):
            return None
        return block


class SegmentBlockVisitor:
    """Drops blocks restricted to another segment of the current site."""

    def __init__(self, request_context: RequestContext) -> None:
        self._request_context = request_context

    def visit(self, block: dict[str, Any]) -> dict[str, Any] | None:
        settings = _settings(block)
        site = self._request_context.get_parameter(SITE_PARAMETER)
        segment = self._request_context.get_parameter(SEGMENT_PARAMETER)

        if (
            settings is not None
            and site
            and settings.get("segment_enabled")
            and isinstance(settings.get("segments"), Mapping)
            and settings["segments"].get(site) is not None
            and segment
            and settings["segments"][site] != segment
        ):
            return None
        return block


class TargetGroupBlockVisitor:
    """Drops blocks restricted to target groups the visitor is not in."""

    def __init__(self, request_context: RequestContext) -> None:
        self._request_context = request_context

    def visit(self, block: dict[str, Any]) -> dict[str, Any] | None:
        settings = _settings(block)
        target_group = self._request_context.get_parameter(TARGET_GROUP_PARAMETER)

        if (
            settings is not None
            and settings.get("target_groups_enabled")
            and settings.get("target_groups") is not None
            and target_group not in settings["target_groups"]
        ):
            return None
        return block


class BlockVisitorChain:
    def __init__(self, visitors: Iterable[BlockVisitor] = ()) -> None:
        self._visitors = list(visitors)

    def visit(self, block: dict[str, Any]) -> dict[str, Any] | None:
        for visitor in self._visitors:
            if visitor.visit(block) is None:
                logger.debug(
                    "block_skipped",
                    block_type=block.get("type"),
                    visitor=type(visitor).__name__,
                )
                return None
        return block


__all__ = [
    "SEGMENT_PARAMETER",
    "TARGET_GROUP_PARAMETER",
    "BlockVisitor",
    "BlockVisitorChain",
    "HiddenBlockVisitor",
    "SegmentBlockVisitor",
    "TargetGroupBlockVisitor",
]
