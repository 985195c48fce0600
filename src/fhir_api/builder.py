"""Request builder: validate arguments and assemble FHIR REST requests.

Every ``build_*`` function validates its arguments synchronously and returns a
transport-independent FHIRRequest. Nothing here touches the network, so a
missing argument always fails before any HTTP call is attempted.

The error messages are part of the public contract; callers may match on them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ArgumentError, SchemaError
from .models import AuthOptions, FHIRRequest, PostEncoding, QueryParams
from .query import encode_post_body, encode_query


_CACHE_CONTROL = {"Cache-Control": "no-cache"}
_JSON_CONTENT  = {"Content-Type": "application/json"}
_FORM_CONTENT  = {"Content-Type": "application/x-www-form-urlencoded"}

_FETCH_URL_MISSING       = "Fetching the resource(s) failed because the given url was null or undefined"
_FETCH_BASE_URL_MISSING  = "Fetching the resources failed because the given fhirBaseUrl was null or undefined"
_FETCH_TYPE_MISSING      = "Fetching the resources failed because the given resourceType was null or undefined"
_FETCH_ID_MISSING        = "Fetching the resource failed because the given id was null or undefined"
_SUBMIT_BASE_URL_MISSING = "Resource was not submitted because the given fhirBaseUrl was null or undefined"
_SUBMIT_URL_MISSING      = "Resource was not submitted because the given url was null or undefined"
_SUBMIT_RESOURCE_MISSING = "Resource was not submitted because the given resource was null or undefined"
_DELETE_BASE_URL_MISSING = "Resource was not deleted because the given fhirBaseUrl was null or undefined"
_DELETE_RESOURCE_MISSING = "Resource was not deleted because the given resource was null or undefined"
_DELETE_TYPE_MISSING     = "Resource was not deleted because the given resourceType was null or undefined"
_RESOURCE_TYPE_MISSING   = "Invalid JSON content detected, missing required element: 'resourceType'"
_UPDATE_ID_MISSING       = (
    "Can not update resource, resource body must contain an ID element for update (PUT) operation"
)
_DELETE_ID_MISSING       = (
    "Can not delete resource, resource body must contain an ID element for delete (DELETE) operation"
)


# ------------------------------------------------------------------
# Read operations
# ------------------------------------------------------------------

def build_fetch_by_url(
    url: str | None,
    params: QueryParams = None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """GET an arbitrary URL, e.g. a Bundle ``next`` link."""
    if not url:
        raise ArgumentError(_FETCH_URL_MISSING)
    return FHIRRequest(
        method="GET",
        url=url,
        headers=_headers(auth),
        query=encode_query(params),
    )


def build_fetch_resource(
    fhir_base_url: str | None,
    resource_type: str | None,
    resource_id: str | None,
    params: QueryParams = None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """GET ``<base>/<type>/<id>``.

    An empty-string ``resource_id`` is a valid identifier; only ``None`` is
    rejected.

    Raises:
        ArgumentError: if the base URL or resource type is empty, or the id is None.
    """
    _require_fetch_target(fhir_base_url, resource_type)
    if resource_id is None:
        raise ArgumentError(_FETCH_ID_MISSING)
    return FHIRRequest(
        method="GET",
        url=f"{fhir_base_url}/{resource_type}/{resource_id}",
        headers=_headers(auth),
        query=encode_query(params),
    )


def build_fetch_resources(
    fhir_base_url: str | None,
    resource_type: str | None,
    params: QueryParams = None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """GET ``<base>/<type>`` with multi-valued params encoded as repeated keys."""
    _require_fetch_target(fhir_base_url, resource_type)
    return FHIRRequest(
        method="GET",
        url=f"{fhir_base_url}/{resource_type}",
        headers=_headers(auth),
        query=encode_query(params),
    )


def build_fetch_resources_post(
    fhir_base_url: str | None,
    resource_type: str | None,
    params: QueryParams = None,
    auth: AuthOptions | None = None,
    encoding: PostEncoding = PostEncoding.FORM,
) -> FHIRRequest:
    """POST search parameters as a form body to ``<base>/<type>/_search``.

    Args:
        encoding: PostEncoding.FORM appends one pair per key with normal
                  form escaping; PostEncoding.RAW repeats keys and leaves
                  values unescaped.
    """
    _require_fetch_target(fhir_base_url, resource_type)
    return FHIRRequest(
        method="POST",
        url=f"{fhir_base_url}/{resource_type}/_search",
        headers=_headers(auth, _FORM_CONTENT),
        form=encode_post_body(params, encoding),
    )


# ------------------------------------------------------------------
# Write operations
# ------------------------------------------------------------------

def build_submit_resource(
    fhir_base_url: str | None,
    resource: Mapping[str, Any] | None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """POST a new resource to ``<base>/<type>``.

    A transaction Bundle is posted to the server root (``<base>/``) instead of
    a type endpoint.

    Raises:
        ArgumentError: if the base URL is empty or the resource is None.
        SchemaError: if the resource has no resourceType.
    """
    resource_type = _require_submit_target(fhir_base_url, resource)
    if resource_type == "Bundle" and resource.get("type") == "transaction":
        url = f"{fhir_base_url}/"
    else:
        url = f"{fhir_base_url}/{resource_type}"
    return FHIRRequest(
        method="POST",
        url=url,
        headers=_headers(auth, _JSON_CONTENT),
        payload=resource,
    )


def build_submit_resource_to_url(
    url: str | None,
    resource: Mapping[str, Any] | None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """POST a resource as-is to an arbitrary URL (e.g. an operation endpoint)."""
    if not url:
        raise ArgumentError(_SUBMIT_URL_MISSING)
    if resource is None:
        raise ArgumentError(_SUBMIT_RESOURCE_MISSING)
    return FHIRRequest(
        method="POST",
        url=url,
        headers=_headers(auth, _JSON_CONTENT),
        payload=resource,
    )


def build_update_resource(
    fhir_base_url: str | None,
    resource: Mapping[str, Any] | None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """PUT an existing resource to ``<base>/<type>/<id>``.

    Raises:
        ArgumentError: if the base URL is empty or the resource is None.
        SchemaError: if the resource has no resourceType or its id is None.
    """
    resource_type = _require_submit_target(fhir_base_url, resource)
    if resource.get("id") is None:
        raise SchemaError(_UPDATE_ID_MISSING)
    return FHIRRequest(
        method="PUT",
        url=f"{fhir_base_url}/{resource_type}/{resource['id']}",
        headers=_headers(auth, _JSON_CONTENT),
        payload=resource,
    )


def build_update_resource_by_url(
    fhir_base_url: str | None,
    resource: Mapping[str, Any] | None,
    params: QueryParams = None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """PUT to ``<base>/<type>?<params>`` (conditional update, no id required)."""
    resource_type = _require_submit_target(fhir_base_url, resource)
    return FHIRRequest(
        method="PUT",
        url=f"{fhir_base_url}/{resource_type}",
        headers=_headers(auth, _JSON_CONTENT),
        query=encode_query(params),
        payload=resource,
    )


def build_delete_resource(
    fhir_base_url: str | None,
    resource: Mapping[str, Any] | None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """DELETE ``<base>/<type>/<id>`` addressed by the resource's own fields."""
    if not fhir_base_url:
        raise ArgumentError(_DELETE_BASE_URL_MISSING)
    if resource is None:
        raise ArgumentError(_DELETE_RESOURCE_MISSING)
    if not resource.get("resourceType"):
        raise SchemaError(_RESOURCE_TYPE_MISSING)
    if resource.get("id") is None:
        raise SchemaError(_DELETE_ID_MISSING)
    return FHIRRequest(
        method="DELETE",
        url=f"{fhir_base_url}/{resource['resourceType']}/{resource['id']}",
        headers=_headers(auth, _JSON_CONTENT),
    )


def build_delete_resource_by_id(
    fhir_base_url: str | None,
    resource_type: str | None,
    resource_id: str | None,
    auth: AuthOptions | None = None,
) -> FHIRRequest:
    """DELETE ``<base>/<type>/<id>``."""
    if not fhir_base_url:
        raise ArgumentError(_DELETE_BASE_URL_MISSING)
    if not resource_type:
        raise ArgumentError(_DELETE_TYPE_MISSING)
    if resource_id is None:
        raise ArgumentError(_DELETE_ID_MISSING)
    return FHIRRequest(
        method="DELETE",
        url=f"{fhir_base_url}/{resource_type}/{resource_id}",
        headers=_headers(auth, _JSON_CONTENT),
    )


# ------------------------------------------------------------------
# Private helpers
# ------------------------------------------------------------------

def _headers(auth: AuthOptions | None, extra: dict[str, str] | None = None) -> dict[str, str]:
    headers = dict(_CACHE_CONTROL)
    if extra:
        headers.update(extra)
    if auth is not None:
        headers.update(auth.header())
    return headers


def _require_fetch_target(fhir_base_url: str | None, resource_type: str | None) -> None:
    if not fhir_base_url:
        raise ArgumentError(_FETCH_BASE_URL_MISSING)
    if not resource_type:
        raise ArgumentError(_FETCH_TYPE_MISSING)


def _require_submit_target(
    fhir_base_url: str | None,
    resource: Mapping[str, Any] | None,
) -> str:
    if not fhir_base_url:
        raise ArgumentError(_SUBMIT_BASE_URL_MISSING)
    if resource is None:
        raise ArgumentError(_SUBMIT_RESOURCE_MISSING)
    resource_type = resource.get("resourceType")
    if not resource_type:
        raise SchemaError(_RESOURCE_TYPE_MISSING)
    return resource_type
