"""Flatten FHIR search Bundles into plain lists of resources.

Example::

    bundle = {
        "resourceType": "Bundle",
        "type": "searchset",
        "total": 2,
        "entry": [
            {"fullUrl": "https://fhir.example.com/r4/Patient/6",
             "resource": {"resourceType": "Patient", "id": "6"}},
            {"fullUrl": "https://fhir.example.com/r4/Patient/8",
             "resource": {"resourceType": "Patient", "id": "8"}},
        ],
    }

    map_fhir_data(bundle)
    # -> [{"resourceType": "Patient", "id": "6"},
    #     {"resourceType": "Patient", "id": "8"}]

Neither function raises: malformed input yields an empty list.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def map_fhir_data(bundle: Any) -> list[Any]:
    """Return the ``resource`` of every Bundle entry, in entry order.

    Entries without a ``resource`` (or that are not objects) map to None so
    that positions line up 1:1 with ``bundle["entry"]``.
    """
    if not isinstance(bundle, Mapping):
        return []
    entries = bundle.get("entry")
    if not isinstance(entries, (list, tuple)):
        return []
    return [
        entry.get("resource") if isinstance(entry, Mapping) else None
        for entry in entries
    ]


def map_fhir_response(response: Any) -> list[Any]:
    """Return the resources of a search response.

    Accepts a ``requests.Response``, an ``httpx.Response``, or a mapping with
    the decoded JSON under ``"body"``.
    """
    if response is None:
        return []
    body = _response_body(response)
    if not isinstance(body, Mapping) or not isinstance(body.get("entry"), (list, tuple)):
        return []
    return map_fhir_data(body)


def _response_body(response: Any) -> Any:
    if isinstance(response, Mapping):
        return response.get("body")
    decode = getattr(response, "json", None)
    if not callable(decode):
        return None
    try:
        return decode()
    except ValueError:
        # requests and httpx both raise ValueError subclasses for non-JSON bodies
        return None
