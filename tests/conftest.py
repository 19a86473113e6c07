"""
Shared pytest fixtures and configuration for dimcontent tests.

This module provides:
- Logging configured once per session (stderr, no logger caching)
- Settings cache cleanup for test isolation
- The YAML templates and contents under ``tests/fixtures``
- A container wired against an in-memory SQLite route store

Usage:
    Fixtures are auto-discovered by pytest; use them as function arguments.

    def test_something(container, imported_contents):
        ...
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest

from dimcontent.container import ContentContainer
from dimcontent.core.logging import configure_logging
from dimcontent.core.settings import DimContentSettings, clear_settings_cache
from dimcontent.metadata import FormMetadataLoader
from dimcontent.routing import RequestContext

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TEMPLATES_DIR = FIXTURES_DIR / "templates"
CONTENTS_FILE = FIXTURES_DIR / "contents.yaml"


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if test_path.parts[0] in ("cli", "routing") or "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration", "slow"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Session Setup / Cleanup Fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def configure_test_logging() -> None:
    """
    Log everything to the session stderr.

    Loggers are not cached: the CLI runner swaps stdout/stderr per
    invocation, and a cached logger would keep writing to a closed stream.
    """
    configure_logging(level="DEBUG", json_format=False, stream=sys.stderr, cache_loggers=False)


@pytest.fixture(autouse=True)
def clean_settings_cache_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear cached settings before and after each test.

    ``DIMCONTENT_*`` variables of the developer's shell never leak into tests.
    """
    for name in list(os.environ):
        if name.startswith("DIMCONTENT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(Path(__file__).parent)
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Metadata / Routing Fixtures
# =============================================================================


@pytest.fixture
def templates_dir() -> Path:
    return TEMPLATES_DIR


@pytest.fixture
def contents_file() -> Path:
    return CONTENTS_FILE


@pytest.fixture
def form_metadata_loader() -> FormMetadataLoader:
    """Form metadata of ``tests/fixtures/templates``."""
    return FormMetadataLoader(TEMPLATES_DIR)


@pytest.fixture
def request_context() -> RequestContext:
    return RequestContext(scheme="https", host="example.org")


# =============================================================================
# Container Fixtures
# =============================================================================


@pytest.fixture
def settings() -> DimContentSettings:
    return DimContentSettings(
        database_url="sqlite://",
        templates_dir=TEMPLATES_DIR,
        host="example.org",
        _env_file=None,
    )


@pytest.fixture
def container(settings: DimContentSettings) -> Generator[ContentContainer, None, None]:
    """
    Container with an in-memory route store, schema created.

    Closed after the test.
    """
    with ContentContainer(settings) as c:
        c.create_schema()
        yield c


@pytest.fixture
def imported_contents(container: ContentContainer) -> ContentContainer:
    """The container after importing ``tests/fixtures/contents.yaml``."""
    container.content_importer.import_file(CONTENTS_FILE)
    return container
