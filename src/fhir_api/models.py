"""Pydantic models describing a prepared FHIR HTTP request."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field


# Either a pre-encoded query string (sent verbatim) or a key/value mapping
# whose values are scalars or sequences of scalars.
QueryParams = Union[str, Mapping[str, Any], None]


class PostEncoding(str, Enum):
    """Body encoding used by search-via-POST (``<type>/_search``)."""

    FORM = "form"  # append per key, form-urlencoded, lists joined with ","
    RAW = "raw"    # repeated keys, no index suffixes, values left unescaped


class AuthOptions(BaseModel):
    """Authorization header settings for a single request."""

    token: str | None = Field(default=None, description="Bearer token or pre-encoded basic credentials")
    basic_auth: bool = Field(default=False, description="Send 'Basic <token>' instead of 'Bearer <token>'")

    def header(self) -> dict[str, str]:
        if not self.token:
            return {}
        scheme = "Basic" if self.basic_auth else "Bearer"
        return {"Authorization": f"{scheme} {self.token}"}


class FHIRRequest(BaseModel):
    """A fully-formed HTTP request, independent of the transport that sends it."""

    method: str = Field(..., description="HTTP verb: GET, POST, PUT or DELETE")
    url: str = Field(..., description="Target URL without query string")
    headers: dict[str, str] = Field(default_factory=dict)
    query: str = Field(default="", description="Encoded query string, empty when no params")
    payload: Any = Field(default=None, description="JSON resource body, passed through untouched")
    form: str | None = Field(default=None, description="Encoded form body for search-via-POST")

    @property
    def full_url(self) -> str:
        if not self.query:
            return self.url
        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}{self.query}"
