"""Client configuration loaded from environment variables.

  FHIR_BASE_URL        Base URL of the FHIR server (required by every call)
  FHIR_TOKEN           Bearer token, or pre-encoded basic credentials
  FHIR_BASIC_AUTH      1/true/yes/on to send 'Basic <token>'
  FHIR_POST_ENCODING   'form' (default) or 'raw' for _search POST bodies
  FHIR_TIMEOUT         Request timeout in seconds
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from .models import PostEncoding

_TRUTHY = {"1", "true", "yes", "on"}


class FHIRSettings(BaseModel):
    """Connection settings shared by FHIRClient and AsyncFHIRClient."""

    base_url: str = Field(default="", description="FHIR server base URL")
    token: str | None = Field(default=None, description="Authorization token")
    basic_auth: bool = Field(default=False, description="Use the Basic scheme instead of Bearer")
    post_encoding: PostEncoding = Field(default=PostEncoding.FORM)
    timeout: float | None = Field(default=None, description="Request timeout in seconds")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "FHIRSettings":
        """Build settings from ``os.environ`` (or the given mapping).

        Raises:
            pydantic.ValidationError: if FHIR_POST_ENCODING or FHIR_TIMEOUT is invalid.
        """
        env = os.environ if environ is None else environ
        return cls(
            base_url=env.get("FHIR_BASE_URL", ""),
            token=env.get("FHIR_TOKEN") or None,
            basic_auth=env.get("FHIR_BASIC_AUTH", "").strip().lower() in _TRUTHY,
            post_encoding=env.get("FHIR_POST_ENCODING", "").strip().lower() or PostEncoding.FORM,
            timeout=env.get("FHIR_TIMEOUT") or None,
        )
