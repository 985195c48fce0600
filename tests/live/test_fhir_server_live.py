"""Live round-trip against a real FHIR R4 server.

Creates a throwaway Patient, reads it back, searches for it, updates it and
deletes it. The HAPI public server (https://hapi.fhir.org/baseR4) accepts
all of these without credentials.

Run:
  FHIR_LIVE_BASE_URL=https://hapi.fhir.org/baseR4 pytest tests/live -v -m live
"""

from __future__ import annotations

import uuid

import pytest

from fhir_api import FHIRClient, map_fhir_response
from tests.live.conftest import skip_no_fhir_server

pytestmark = [pytest.mark.live, skip_no_fhir_server]


class TestLiveFHIRServer:

    def test_server_is_reachable(self, live_client: FHIRClient) -> None:
        response = live_client.fetch_conformance_statement()
        assert response.status_code == 200
        assert response.json().get("resourceType") == "CapabilityStatement"

    def test_patient_crud_round_trip(self, live_client: FHIRClient) -> None:
        family = f"fhirapi-{uuid.uuid4().hex[:12]}"
        created = live_client.submit_resource({
            "resourceType": "Patient",
            "name": [{"family": family, "given": ["Live"]}],
        })
        assert created.status_code == 201
        patient = created.json()
        patient_id = patient["id"]

        try:
            fetched = live_client.fetch_patient(patient_id).json()
            assert fetched["name"][0]["family"] == family

            found = map_fhir_response(live_client.fetch_patients(params={"family": family}))
            assert patient_id in [p["id"] for p in found]

            patient["active"] = False
            updated = live_client.update_resource(patient)
            assert updated.json()["active"] is False
        finally:
            live_client.delete_resource_by_id("Patient", patient_id)

    def test_search_via_post_returns_bundle(self, live_client: FHIRClient) -> None:
        response = live_client.fetch_resources_post("Patient", {"_count": 1})
        assert response.json()["resourceType"] == "Bundle"
