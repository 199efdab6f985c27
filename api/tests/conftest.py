"""Pytest fixtures for the destination catalog."""

import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from wanderlust import main
from wanderlust.config import Settings
from wanderlust.services.backends import MockBackend, SupabaseBackend
from wanderlust.services.catalog import CatalogService
from wanderlust.utils.catalog import get_catalog

SUPABASE_URL = "https://demo-project.supabase.co"


def make_row(**overrides):
    row = {
        "id": 42,
        "name": "Gokyo Lakes Trek",
        "country": "Nepal",
        "region": "Khumbu",
        "description": "Turquoise lakes below Cho Oyu.",
        "image_url": "https://example.com/gokyo.jpg",
        "price": 1599,
        "duration": "12 days",
        "rating": 4.8,
        "difficulty_level": "Challenging",
        "best_season": "Autumn",
        "highlights": ["Gokyo Ri"],
        "created_at": "2024-03-01T10:00:00+00:00",
    }
    row.update(overrides)
    return row


class RecordingTransport:
    """Collects requests and answers them with a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


def make_remote_catalog(handler) -> tuple:
    recorder = RecordingTransport(handler)
    backend = SupabaseBackend(
        url=SUPABASE_URL,
        anon_key="anon-key",
        transport=httpx.MockTransport(recorder),
    )
    return CatalogService(backend, search_limit=10), recorder


@pytest.fixture
def catalog():
    """Catalog backed by the seed destinations."""
    return CatalogService(MockBackend(), search_limit=10)


@pytest.fixture
def fallback_settings():
    return Settings(_env_file=None, SUPABASE_URL="", SUPABASE_ANON_KEY="")


@pytest.fixture
def client(monkeypatch, fallback_settings):
    """API client running on the seed catalog regardless of the environment."""
    monkeypatch.setattr(main, "settings", fallback_settings)
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


@pytest.fixture
def use_catalog():
    """Swap the catalog the routers see for the duration of a test."""
    def _use(catalog_service: CatalogService):
        main.app.dependency_overrides[get_catalog] = lambda: catalog_service
        return catalog_service
    yield _use
    main.app.dependency_overrides.clear()
