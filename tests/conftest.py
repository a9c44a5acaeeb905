"""
conftest.py — Shared test fixtures for the Catalog API.

Every test gets an application built by ``create_app`` so the
in‑memory stores start empty and never leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
