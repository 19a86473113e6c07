"""
Normalizer contract and the ordered normalization pipeline.

:class:`ContentNormalizer` turns a (merged) dimension content into a plain
mapping: it collects the attributes every normalizer wants suppressed,
dumps the remaining public attributes, then lets each normalizer enhance
the mapping in registration order.

Examples:
    >>> normalizer = ContentNormalizer(default_normalizers())
    >>> normalizer.normalize(merged)["template"]
    'homepage'

Tags:
    normalizer, pipeline, serialization, dimcontent
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable

from dimcontent.core.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Normalizer(Protocol):
    def ignored_attributes(self, obj: object) -> list[str]:
        """Attributes removed from the dump before enhancing."""
        ...

    def enhance(self, obj: object, data: dict[str, Any]) -> dict[str, Any]:
        ...


def normalize_value(value: Any) -> Any:
    """Convert a value to JSON-compatible primitives."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: normalize_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {key: normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return value


class ContentNormalizer:
    def __init__(self, normalizers: Iterable[Normalizer]) -> None:
        self._normalizers = list(normalizers)

    def normalize(self, obj: object) -> dict[str, Any]:
        ignored: set[str] = set()
        for normalizer in self._normalizers:
            ignored.update(normalizer.ignored_attributes(obj))

        data = {
            name: normalize_value(value)
            for name, value in self._public_attributes(obj).items()
            if name not in ignored
        }

        for normalizer in self._normalizers:
            data = normalizer.enhance(obj, data)

        logger.debug("dimension_content_normalized", keys=len(data), ignored=sorted(ignored))
        return data

    @staticmethod
    def _public_attributes(obj: object) -> dict[str, Any]:
        if dataclasses.is_dataclass(obj):
            names = [f.name for f in dataclasses.fields(obj)]
        else:
            names = list(vars(obj))
        return {name: getattr(obj, name) for name in names if not name.startswith("_")}


__all__ = ["ContentNormalizer", "Normalizer", "normalize_value"]
