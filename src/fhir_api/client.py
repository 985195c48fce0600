"""Blocking FHIR REST client on top of requests."""

from __future__ import annotations

import logging

import requests

from .base_client import BaseFHIRClient
from .config import FHIRSettings
from .models import FHIRRequest, PostEncoding

logger = logging.getLogger(__name__)


class FHIRClient(BaseFHIRClient):
    """FHIR client that sends each request through a ``requests.Session``.

    Non-2xx responses raise ``requests.HTTPError`` and connection failures
    raise ``requests.ConnectionError``; neither is caught or retried.
    """

    def __init__(
        self,
        base_url: str | None,
        token: str | None = None,
        basic_auth: bool = False,
        post_encoding: PostEncoding = PostEncoding.FORM,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(base_url, token, basic_auth, post_encoding)
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(
        cls,
        settings: FHIRSettings,
        session: requests.Session | None = None,
    ) -> "FHIRClient":
        return cls(
            settings.base_url,
            token=settings.token,
            basic_auth=settings.basic_auth,
            post_encoding=settings.post_encoding,
            timeout=settings.timeout,
            session=session,
        )

    def _send(self, request: FHIRRequest) -> requests.Response:
        logger.debug("%s %s", request.method, request.full_url)
        response = self._session.request(
            request.method,
            request.url,
            params=request.query or None,
            headers=request.headers,
            json=request.payload,
            data=request.form,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "FHIRClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
