"""Unit tests for the Bundle response mapper."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import requests_mock as req_mock
import requests

from fhir_api.mapping import map_fhir_data, map_fhir_response


class TestMapFhirData:
    def test_resources_in_entry_order(self, search_bundle: dict) -> None:
        resources = map_fhir_data(search_bundle)
        assert resources == [
            {"resourceType": "Patient", "id": "6"},
            {"resourceType": "Patient", "id": "8"},
        ]

    def test_empty_mapping_returns_empty_list(self) -> None:
        assert map_fhir_data({}) == []

    def test_none_returns_empty_list(self) -> None:
        assert map_fhir_data(None) == []

    def test_entry_not_a_list_returns_empty_list(self) -> None:
        assert map_fhir_data({"resourceType": "Bundle", "entry": "oops"}) == []
        assert map_fhir_data({"resourceType": "Bundle", "entry": {"resource": {}}}) == []
        assert map_fhir_data({"resourceType": "Bundle", "entry": None}) == []

    def test_non_mapping_input_returns_empty_list(self) -> None:
        assert map_fhir_data("Bundle") == []
        assert map_fhir_data([{"resource": {}}]) == []

    def test_entries_without_resource_keep_their_position(self) -> None:
        bundle = {"entry": [{"resource": {"id": "a"}}, {"fullUrl": "x"}, {"resource": {"id": "c"}}]}
        assert map_fhir_data(bundle) == [{"id": "a"}, None, {"id": "c"}]

    def test_non_mapping_entries_become_none(self) -> None:
        assert map_fhir_data({"entry": [None, 3, {"resource": "r"}]}) == [None, None, "r"]


class TestMapFhirResponse:
    def test_requests_response(self, search_bundle: dict) -> None:
        with req_mock.Mocker() as m:
            m.get("https://fhir.example.com/r4/Patient", json=search_bundle)
            response = requests.get("https://fhir.example.com/r4/Patient")
        assert [r["id"] for r in map_fhir_response(response)] == ["6", "8"]

    def test_httpx_response(self, search_bundle: dict) -> None:
        response = httpx.Response(200, json=search_bundle)
        assert [r["id"] for r in map_fhir_response(response)] == ["6", "8"]

    def test_body_mapping(self, search_bundle: dict) -> None:
        assert len(map_fhir_response({"body": search_bundle})) == 2

    def test_none_response(self) -> None:
        assert map_fhir_response(None) == []

    def test_body_without_entry(self) -> None:
        assert map_fhir_response({"body": {"resourceType": "Bundle", "total": 0}}) == []
        assert map_fhir_response({"status": 200}) == []

    def test_non_json_body(self) -> None:
        response = httpx.Response(200, text="<html>not json</html>")
        assert map_fhir_response(response) == []

    def test_object_without_json_method(self) -> None:
        assert map_fhir_response(object()) == []

    def test_json_decode_error_is_swallowed(self) -> None:
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        assert map_fhir_response(response) == []
