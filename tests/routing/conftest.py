"""Route store fixtures: an in-memory SQLite session per test."""

from typing import Generator

import pytest
from sqlalchemy.orm import Session

from dimcontent.core.orm import DimContentBase, create_dimcontent_engine, dimcontent_session_factory
from dimcontent.routing import RouteRepository


@pytest.fixture
def session() -> Generator[Session, None, None]:
    engine = create_dimcontent_engine("sqlite://")
    DimContentBase.metadata.create_all(engine)
    session = dimcontent_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def route_repository(session: Session) -> RouteRepository:
    return RouteRepository(session)
