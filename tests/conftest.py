"""
Test configuration and fixtures for the Energy Price API tests.
Contains shared fixtures and test utilities.
"""

from typing import Any, Dict, List
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_price_service
from src.config import Settings
from src.main import create_app
from src.storage.cache import CacheService


def make_entries(prices: List[Any], scores: List[Any] = None) -> List[Dict[str, Any]]:
    """
    Build upstream-shaped entries from parallel price/score lists.
    """
    scores = scores if scores is not None else [None] * len(prices)
    entries = []
    for hour, (price, score) in enumerate(zip(prices, scores)):
        entry = {
            "datetime": f"2025-06-01T{hour:02d}:00:00.000000Z",
            "total_price_tax_included": price,
        }
        if score is not None:
            entry["sustainability_score"] = score
        entries.append(entry)
    return entries


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """
    Settings pointing the cache at a temporary directory.
    """
    return Settings(
        zonneplan_api_base_url="https://api.example.test",
        zonneplan_api_secret="test-secret",
        data_dir=str(tmp_path / "data"),
        upstream_backoff_seconds=0,
        log_format="text",
    )


@pytest.fixture
def mock_price_service():
    """
    Create a mock price service for testing.
    """
    return AsyncMock()


@pytest.fixture
def test_app(test_settings, mock_price_service):
    """
    Create a test instance of the FastAPI application with a mocked price service.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_price_service] = lambda: mock_price_service
    return app


@pytest.fixture
def test_client(test_app):
    """
    Create a test client for the FastAPI application.
    """
    return TestClient(test_app)


@pytest.fixture
def cache_service(test_settings) -> CacheService:
    return CacheService(test_settings.data_dir)


@pytest.fixture
def electricity_payload() -> Dict[str, Any]:
    """
    Upstream electricity response with one null-priced entry.
    """
    return {
        "data": make_entries(
            [0.25, 0.18, None, 0.31, 0.18],
            [40.0, 75.0, 90.0, 20.0, 60.0],
        )
    }


@pytest.fixture
def gas_payload() -> Dict[str, Any]:
    """
    Upstream gas response.
    """
    return {"data": make_entries([1.21, 1.19, 1.24])}


@pytest.fixture
def entries():
    """
    Factory fixture building upstream-shaped entries.
    """
    return make_entries
