"""Example: submit a transaction Bundle, then clean up with a conditional update and deletes.

Runs against a mocked server so no network access is needed.

Usage:
    python examples/transaction_bundle.py
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import requests_mock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fhir_api import ArgumentError, FHIRClient, map_fhir_response


BASE_URL = "https://fhir.example.com/r4"

TRANSACTION = {
    "resourceType": "Bundle",
    "type": "transaction",
    "entry": [
        {
            "fullUrl": "urn:uuid:61ebe359-bfdc-4613-8bf2-c5e300945f0a",
            "resource": {"resourceType": "Patient", "name": [{"family": "Example"}]},
            "request": {"method": "POST", "url": "Patient"},
        },
        {
            "resource": {
                "resourceType": "Observation",
                "status": "final",
                "code": {"coding": [{"system": "http://loinc.org", "code": "8867-4"}]},
                "subject": {"reference": "urn:uuid:61ebe359-bfdc-4613-8bf2-c5e300945f0a"},
            },
            "request": {"method": "POST", "url": "Observation"},
        },
    ],
}


def main() -> None:
    print("=== FHIR transaction Bundle demo ===\n")

    with requests_mock.Mocker() as m:
        m.post(f"{BASE_URL}/", json={
            "resourceType": "Bundle",
            "type": "transaction-response",
            "entry": [
                {"resource": {"resourceType": "Patient", "id": "p-1"}},
                {"resource": {"resourceType": "Observation", "id": "o-1"}},
            ],
        })
        m.put(f"{BASE_URL}/Patient", json={"resourceType": "Patient", "id": "p-1"})
        m.delete(f"{BASE_URL}/Observation/o-1", status_code=204)
        m.delete(f"{BASE_URL}/Patient/p-1", status_code=204)

        client = FHIRClient(BASE_URL, token="demo-token")

        response = client.submit_resource(TRANSACTION)
        print(f"POST {m.last_request.url} -> {response.status_code}")
        created = map_fhir_response(response)
        print(json.dumps(created, indent=2))

        client.update_resource_by_url(
            {"resourceType": "Patient", "active": False},
            params={"identifier": "http://example.org/mrn|12345"},
        )
        print(f"PUT {m.last_request.url}")

        for resource in reversed(created):
            client.delete_resource(resource)
            print(f"DELETE {m.last_request.url}")

    try:
        client.delete_resource_by_id("Patient", None)
    except ArgumentError as exc:
        print(f"\nRejected before sending: {exc}")

    print("\nTransaction demo complete.")


if __name__ == "__main__":
    main()
