"""Non-blocking FHIR REST client on top of httpx."""

from __future__ import annotations

import logging

import httpx

from .base_client import BaseFHIRClient
from .config import FHIRSettings
from .models import FHIRRequest, PostEncoding

logger = logging.getLogger(__name__)


class AsyncFHIRClient(BaseFHIRClient):
    """FHIR client whose operations return awaitables of ``httpx.Response``.

    Argument validation still raises immediately when an operation is
    called; only the HTTP round-trip is awaited. Non-2xx responses raise
    ``httpx.HTTPStatusError``.

    Usage::

        async with AsyncFHIRClient("https://hapi.fhir.org/baseR4") as client:
            response = await client.fetch_patient("209")
    """

    def __init__(
        self,
        base_url: str | None,
        token: str | None = None,
        basic_auth: bool = False,
        post_encoding: PostEncoding = PostEncoding.FORM,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(base_url, token, basic_auth, post_encoding)
        self.timeout = timeout
        if client is None:
            # None keeps httpx's own default timeout
            client = httpx.AsyncClient() if timeout is None else httpx.AsyncClient(timeout=timeout)
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: FHIRSettings,
        client: httpx.AsyncClient | None = None,
    ) -> "AsyncFHIRClient":
        return cls(
            settings.base_url,
            token=settings.token,
            basic_auth=settings.basic_auth,
            post_encoding=settings.post_encoding,
            timeout=settings.timeout,
            client=client,
        )

    async def _send(self, request: FHIRRequest) -> httpx.Response:
        logger.debug("%s %s", request.method, request.full_url)
        extra = {} if self.timeout is None else {"timeout": self.timeout}
        # The query is already encoded; handing it to httpx as params would re-encode it.
        response = await self._client.request(
            request.method,
            httpx.URL(request.full_url),
            headers=request.headers,
            json=request.payload,
            content=request.form,
            **extra,
        )
        response.raise_for_status()
        return response

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncFHIRClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
