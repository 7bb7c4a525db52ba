from __future__ import annotations

import os
import tempfile

# Settings are read at import time, so the environment must be in place first
_DB_DIR = tempfile.mkdtemp(prefix="vision-guide-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/test.db"
os.environ["AUTH_TOKEN_SECRET"] = "test-secret-with-enough-length-for-hs256"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_geocoder
from app.core.database import Base, engine
from app.main import app
from app.modules.localisation.providers.base import GeocodeHit, GeocoderError, GeocoderProvider


class FakeGeocoder(GeocoderProvider):
    def __init__(self) -> None:
        self.forward_hits: list[GeocodeHit] = []
        self.reverse_hits: list[GeocodeHit] = []
        self.error: Exception | None = None
        self.calls: list[tuple] = []

    def name(self) -> str:
        return "fake"

    def forward(self, address: str) -> list[GeocodeHit]:
        self.calls.append(("forward", address))
        if self.error:
            raise self.error
        return list(self.forward_hits)

    def reverse(self, latitude: float, longitude: float) -> list[GeocodeHit]:
        self.calls.append(("reverse", latitude, longitude))
        if self.error:
            raise self.error
        return list(self.reverse_hits)

    def fail(self, message: str = "upstream unavailable") -> None:
        self.error = GeocoderError(message)


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def client(geocoder: FakeGeocoder):
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(client: TestClient):
    def _make(email: str = "alice@example.com", parameters: dict | None = None) -> dict:
        response = client.post(
            "/users",
            json={
                "email": email,
                "password": "correct-horse",
                "full_name": "Alice Martin",
                "parameters": parameters or {},
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make
