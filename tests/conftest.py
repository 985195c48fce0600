"""Shared pytest fixtures, mock factories, and test markers.

Test tiers
----------
  unit        Fast, fully offline, zero external dependencies.
              Always run.

  integration Mock the FHIR server (requests_mock / httpx.MockTransport).
              Always run. Validates end-to-end client flows without real
              network calls.

  quality     Property-based tests (Hypothesis) over the pure request
              builder, serializers and bundle mapper. Always run offline.

  live        Real HTTP calls. Skipped unless FHIR_LIVE_BASE_URL is set.
              See tests/live/conftest.py.

Run specific tiers:
  pytest tests/unit tests/integration tests/quality   # offline only
  pytest tests/live -m live                           # live only
  pytest tests/ -v                                    # everything
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
import requests


BASE_URL = "https://fhir.example.com/r4"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: mock-based integration tests")
    config.addinivalue_line("markers", "quality: property-based tests")
    config.addinivalue_line("markers", "live: requires a reachable FHIR server (skipped by default)")


# ---------------------------------------------------------------------------
# FHIR resource fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def patient() -> dict:
    return {"resourceType": "Patient", "id": "209", "name": [{"family": "Chalmers", "given": ["Peter"]}]}


@pytest.fixture
def search_bundle() -> dict:
    return {
        "resourceType": "Bundle",
        "type": "searchset",
        "total": 2,
        "entry": [
            {
                "fullUrl": f"{BASE_URL}/Patient/6",
                "resource": {"resourceType": "Patient", "id": "6"},
            },
            {
                "fullUrl": f"{BASE_URL}/Patient/8",
                "resource": {"resourceType": "Patient", "id": "8"},
            },
        ],
    }


@pytest.fixture
def transaction_bundle() -> dict:
    return {
        "resourceType": "Bundle",
        "type": "transaction",
        "entry": [
            {
                "resource": {"resourceType": "Patient"},
                "request": {"method": "POST", "url": "Patient"},
            }
        ],
    }


# ---------------------------------------------------------------------------
# Transport mocks
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_session() -> MagicMock:
    """A requests.Session stand-in; every request returns a 200 response."""
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {}
    response.raise_for_status = MagicMock()
    session.request.return_value = response
    return session


def make_mock_transport(
    status_code: int = 200,
    body: dict | None = None,
) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    """Build an httpx.MockTransport answering every request, plus the list it records into."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, json=body if body is not None else {})

    return httpx.MockTransport(handler), seen
