"""Data mapper fixtures."""

from typing import Generator

import pytest

from dimcontent.core.orm import DimContentBase, create_dimcontent_engine, dimcontent_session_factory
from dimcontent.routing import RouteRepository


@pytest.fixture
def route_repository() -> Generator[RouteRepository, None, None]:
    engine = create_dimcontent_engine("sqlite://")
    DimContentBase.metadata.create_all(engine)
    session = dimcontent_session_factory(engine)()
    yield RouteRepository(session)
    session.close()
    engine.dispose()
