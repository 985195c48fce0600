"""Example: search Patients on a FHIR server and walk every result page.

Usage:
    FHIR_BASE_URL=https://hapi.fhir.org/baseR4 python examples/search_patients.py Smith
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fhir_api import FHIRClient, FHIRSettings, map_fhir_response


MAX_PAGES = 3


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    family = sys.argv[1] if len(sys.argv) > 1 else "Smith"

    settings = FHIRSettings.from_env()
    if not settings.base_url:
        settings.base_url = "https://hapi.fhir.org/baseR4"

    print(f"=== Patient search on {settings.base_url} (family={family}) ===\n")

    with FHIRClient.from_settings(settings) as client:
        capability = client.fetch_conformance_statement().json()
        print(f"Server FHIR version: {capability.get('fhirVersion')}\n")

        response = client.fetch_patients(params={"family": family, "_count": 10})
        for page in range(1, MAX_PAGES + 1):
            patients = map_fhir_response(response)
            print(f"Page {page}: {len(patients)} patient(s)")
            for patient in patients:
                names = patient.get("name") or [{}]
                print(f"  {patient['id']}: {json.dumps(names[0])}")

            links = {link["relation"]: link["url"] for link in response.json().get("link", [])}
            if "next" not in links:
                break
            response = client.fetch_by_url(links["next"])

    print("\nSearch demo complete.")


if __name__ == "__main__":
    main()
