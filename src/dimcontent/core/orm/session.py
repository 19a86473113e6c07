"""SQLAlchemy engine factory and session class.

This module provides:

* ``create_dimcontent_engine``  -- Create a SA engine from a URL.
* ``DimContentSession``         -- Session with ``expire_on_commit=False``.
* ``dimcontent_session_factory`` -- ``sessionmaker`` producing the above.

Tags:
    dimcontent, orm, sqlalchemy, session, engine
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine as _sa_create_engine
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def create_dimcontent_engine(
    url: str = "sqlite:///dimcontent.db",
    *,
    echo: bool = False,
    **kwargs: Any,
) -> Engine:
    """Create a SQLAlchemy engine with sane defaults.

    Parameters
    ----------
    url:
        Database URL (``sqlite:///…``, ``postgresql://…``, etc.)
    echo:
        If ``True``, log all SQL to stdout.
    **kwargs:
        Extra arguments forwarded to ``sqlalchemy.create_engine``.
    """
    if not url.startswith("sqlite"):
        return _sa_create_engine(url, echo=echo, **kwargs)

    kwargs.setdefault("connect_args", {"check_same_thread": False})
    # One shared connection, otherwise every checkout sees an empty database
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs.setdefault("poolclass", StaticPool)

    engine = _sa_create_engine(url, echo=echo, **kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _rec: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


class DimContentSession(Session):
    """Pre-configured session with ``expire_on_commit=False``.

    Prevents lazy-load surprises after commit.
    """

    def __init__(self, bind: Engine | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("expire_on_commit", False)
        super().__init__(bind=bind, **kwargs)


def dimcontent_session_factory(engine: Engine) -> sessionmaker[DimContentSession]:
    """Return a ``sessionmaker`` bound to *engine* that produces ``DimContentSession`` instances."""
    return sessionmaker(bind=engine, class_=DimContentSession)


__all__ = [
    "create_dimcontent_engine",
    "DimContentSession",
    "dimcontent_session_factory",
]
