"""SQLAlchemy base and session helpers."""

from dimcontent.core.orm.base import DimContentBase
from dimcontent.core.orm.session import (
    DimContentSession,
    create_dimcontent_engine,
    dimcontent_session_factory,
)

__all__ = [
    "DimContentBase",
    "DimContentSession",
    "create_dimcontent_engine",
    "dimcontent_session_factory",
]
