"""Mock implementations for testing."""

from tests.mocks.catalog import MockCatalogProvider, StubFetcher
from tests.mocks.renderer import RecordingRenderer, RenderedStrip

__all__ = [
    "MockCatalogProvider",
    "RecordingRenderer",
    "RenderedStrip",
    "StubFetcher",
]
