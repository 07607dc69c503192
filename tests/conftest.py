"""Shared pytest fixtures for block-carousel tests."""

import random
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.adapters.static_catalog import REFERENCE_BLOCKS, StaticCatalogProvider
from src.api.app import create_app
from src.core.blocks import BlockRecord
from tests.mocks import RecordingRenderer


@pytest.fixture
def reference_blocks() -> list[BlockRecord]:
    """Provide the built-in Bilbao/Barcelona/Donostia catalog."""
    return list(REFERENCE_BLOCKS)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a deterministic random source for image selection."""
    return random.Random(1234)


@pytest.fixture
def renderer() -> RecordingRenderer:
    """Provide a recording renderer with a 900px wide strip."""
    return RecordingRenderer(width=900.0)


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Provide a throwaway static directory with a shell and one asset."""
    (tmp_path / "index.html").write_text("<html><body>carousel</body></html>")
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "carousel.js").write_text("console.log('carousel');")
    return tmp_path


@pytest.fixture
def client(static_dir: Path) -> Generator[TestClient, None, None]:
    """Provide a TestClient for an app serving the reference catalog.

    The client is entered as a context manager so the lifespan loads the
    catalog before the first request.
    """
    app = create_app(
        static_dir=static_dir,
        catalog=StaticCatalogProvider(),
        request_logging=False,
    )
    with TestClient(app) as test_client:
        yield test_client
