"""Skip guards for live tests.

Every live test talks to a real FHIR R4 server and is skipped unless
FHIR_LIVE_BASE_URL is set. Tests silently skip when it is absent; they never
fail due to missing config.

Environment variables:
  FHIR_LIVE_BASE_URL   Base URL of a writable FHIR R4 server
                       (e.g. https://hapi.fhir.org/baseR4)
  FHIR_LIVE_TOKEN      Optional bearer token for that server

Run:
  export FHIR_LIVE_BASE_URL=https://hapi.fhir.org/baseR4
  pytest tests/live -v -m live
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from fhir_api import FHIRClient


skip_no_fhir_server = pytest.mark.skipif(
    not os.environ.get("FHIR_LIVE_BASE_URL"),
    reason="Set FHIR_LIVE_BASE_URL to run live FHIR server tests",
)


@pytest.fixture(scope="session")
def live_client() -> Iterator[FHIRClient]:
    base_url = os.environ.get("FHIR_LIVE_BASE_URL", "")
    if not base_url:
        pytest.skip("FHIR_LIVE_BASE_URL not set")
    client = FHIRClient(base_url, token=os.environ.get("FHIR_LIVE_TOKEN") or None, timeout=30)
    yield client
    client.close()
