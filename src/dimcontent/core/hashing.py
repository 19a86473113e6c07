"""
Deterministic hashing for cache keys and resource identities.

Two resolvables that point at the same id but carry different metadata
(e.g. different property selections) must be loaded and resolved
separately. They are told apart by a *metadata identifier*: a stable hash
of their metadata mapping. The resource cache uses the same function for
its keys.

Examples:
    >>> compute_json_hash({"properties": {"title": "title"}}) == \\
    ...     compute_json_hash({"properties": {"title": "title"}})
    True
    >>> compute_json_hash(None)
    ''

Tags:
    hashing, utility, dimcontent
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def _canonical(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _canonical(v) for k, v in sorted(value.items(), key=lambda i: str(i[0]))}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    return value


def compute_json_hash(value: Any, length: int = 32) -> str:
    """Hash a JSON-compatible value; empty/``None`` values hash to ``""``.

    Keys are sorted recursively, so mappings that differ only in key order
    hash identically. Non-JSON values fall back to ``str()``.

    Args:
        value: Value to hash
        length: Hex digest length (default 32)
    """
    if not value:
        return ""
    content = json.dumps(_canonical(value), default=str, separators=(",", ":"))
    return hashlib.md5(content.encode()).hexdigest()[:length]


__all__ = ["compute_json_hash"]
