"""Abstract base for FHIR REST clients.

Operations are defined once here and bound to a transport by subclasses.
Each operation builds its request eagerly, so argument validation raises at
call time even on the async client, before any transport is touched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from . import builder
from .models import AuthOptions, FHIRRequest, PostEncoding, QueryParams


class BaseFHIRClient(ABC):
    """Shared operation surface for the blocking and non-blocking clients."""

    def __init__(
        self,
        base_url: str | None,
        token: str | None = None,
        basic_auth: bool = False,
        post_encoding: PostEncoding = PostEncoding.FORM,
    ) -> None:
        self.base_url = (base_url or "").rstrip("/")
        self.auth = AuthOptions(token=token, basic_auth=basic_auth)
        self.post_encoding = PostEncoding(post_encoding)

    @abstractmethod
    def _send(self, request: FHIRRequest) -> Any:
        """Issue the request and return the transport's response (or an awaitable of it)."""

    def _auth(self, auth: AuthOptions | None) -> AuthOptions:
        return auth if auth is not None else self.auth

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def fetch_by_url(
        self,
        url: str | None,
        params: QueryParams = None,
        auth: AuthOptions | None = None,
    ) -> Any:
        """GET an absolute URL, such as a Bundle ``next`` link."""
        return self._send(builder.build_fetch_by_url(url, params, self._auth(auth)))

    def fetch_resource(
        self,
        resource_type: str | None,
        resource_id: str | None,
        params: QueryParams = None,
        auth: AuthOptions | None = None,
    ) -> Any:
        """GET a single resource by type and logical id."""
        return self._send(
            builder.build_fetch_resource(
                self.base_url, resource_type, resource_id, params, self._auth(auth)
            )
        )

    def fetch_resources(
        self,
        resource_type: str | None,
        params: QueryParams = None,
        auth: AuthOptions | None = None,
    ) -> Any:
        """Search a resource type with GET."""
        return self._send(
            builder.build_fetch_resources(self.base_url, resource_type, params, self._auth(auth))
        )

    def fetch_resources_post(
        self,
        resource_type: str | None,
        params: QueryParams = None,
        auth: AuthOptions | None = None,
        encoding: PostEncoding | None = None,
    ) -> Any:
        """Search a resource type with POST ``_search``.

        Args:
            resource_type: FHIR resource type to search.
            params: Search parameters, sent as a form body.
            auth: Overrides the client's default auth for this call.
            encoding: Overrides the client's default PostEncoding for this call.
        """
        return self._send(
            builder.build_fetch_resources_post(
                self.base_url,
                resource_type,
                params,
                self._auth(auth),
                encoding if encoding is not None else self.post_encoding,
            )
        )

    def submit_resource(
        self,
        resource: Mapping[str, Any] | None,
        auth: AuthOptions | None = None,
    ) -> Any:
        """Create a resource (or submit a transaction Bundle to the server root)."""
        return self._send(builder.build_submit_resource(self.base_url, resource, self._auth(auth)))

    def submit_resource_to_url(
        self,
        url: str | None,
        resource: Mapping[str, Any] | None,
        auth: AuthOptions | None = None,
    ) -> Any:
        return self._send(builder.build_submit_resource_to_url(url, resource, self._auth(auth)))

    def update_resource(
        self,
        resource: Mapping[str, Any] | None,
        auth: AuthOptions | None = None,
    ) -> Any:
        """Replace a resource at ``<type>/<id>``."""
        return self._send(builder.build_update_resource(self.base_url, resource, self._auth(auth)))

    def update_resource_by_url(
        self,
        resource: Mapping[str, Any] | None,
        params: QueryParams = None,
        auth: AuthOptions | None = None,
    ) -> Any:
        """Conditional update: the server resolves identity from ``params``."""
        return self._send(
            builder.build_update_resource_by_url(self.base_url, resource, params, self._auth(auth))
        )

    def delete_resource(
        self,
        resource: Mapping[str, Any] | None,
        auth: AuthOptions | None = None,
    ) -> Any:
        return self._send(builder.build_delete_resource(self.base_url, resource, self._auth(auth)))

    def delete_resource_by_id(
        self,
        resource_type: str | None,
        resource_id: str | None,
        auth: AuthOptions | None = None,
    ) -> Any:
        return self._send(
            builder.build_delete_resource_by_id(
                self.base_url, resource_type, resource_id, self._auth(auth)
            )
        )

    # ------------------------------------------------------------------
    # Fixed-type shortcuts
    # ------------------------------------------------------------------

    def fetch_conformance_statement(
        self, params: QueryParams = None, auth: AuthOptions | None = None
    ) -> Any:
        """GET the server's CapabilityStatement (``<base>/metadata``)."""
        return self.fetch_resources("metadata", params, auth)

    def fetch_patient(
        self, resource_id: str | None, params: QueryParams = None, auth: AuthOptions | None = None
    ) -> Any:
        return self.fetch_resource("Patient", resource_id, params, auth)

    def fetch_patients(self, params: QueryParams = None, auth: AuthOptions | None = None) -> Any:
        return self.fetch_resources("Patient", params, auth)

    def fetch_questionnaire(
        self, resource_id: str | None, params: QueryParams = None, auth: AuthOptions | None = None
    ) -> Any:
        return self.fetch_resource("Questionnaire", resource_id, params, auth)

    def fetch_questionnaires(self, params: QueryParams = None, auth: AuthOptions | None = None) -> Any:
        return self.fetch_resources("Questionnaire", params, auth)

    def fetch_value_set(
        self, resource_id: str | None, params: QueryParams = None, auth: AuthOptions | None = None
    ) -> Any:
        return self.fetch_resource("ValueSet", resource_id, params, auth)

    def fetch_value_sets(self, params: QueryParams = None, auth: AuthOptions | None = None) -> Any:
        return self.fetch_resources("ValueSet", params, auth)
