"""Pre-flight errors raised by the request builder.

Transport and HTTP failures are never wrapped: they propagate from the
underlying HTTP client (``requests`` or ``httpx``) exactly as raised.
"""

from __future__ import annotations


class ArgumentError(ValueError):
    """Raised when a required argument (base URL, resource, type or id) is missing."""


class SchemaError(ValueError):
    """Raised when a supplied resource lacks ``resourceType`` or a required ``id``."""
