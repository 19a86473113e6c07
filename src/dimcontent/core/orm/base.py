"""Declarative base and type-map for dimcontent ORM models.

Uses SQLAlchemy 2.0 ``DeclarativeBase`` with a ``type_annotation_map``
so mapped columns can be declared with plain Python types.
"""

from __future__ import annotations

import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase


class DimContentBase(DeclarativeBase):
    """Shared declarative base for every dimcontent table.

    * ``str``   → ``String(255)`` (slugs and keys are indexed)
    * ``int``   → ``Integer``
    * ``bool``  → ``Integer``  (SQLite has no native BOOLEAN)
    * ``datetime.datetime`` → ``DateTime``
    * ``dict``  → ``JSON``
    """

    type_annotation_map = {
        str: String(255),
        int: Integer,
        bool: Integer,
        datetime.datetime: DateTime,
        dict: JSON,
    }


__all__ = ["DimContentBase"]
