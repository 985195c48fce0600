"""Query-string and form-body serializers for FHIR search parameters.

Three encodings are used:

  - encode_query()     : repeated keys, RFC 3986 percent-encoding.
                         ``{"status": ["a", "b"]}`` -> ``status=a&status=b``
  - encode_form()      : one form-urlencoded pair per key; sequence values
                         are joined with commas (``status=a%2Cb``).
  - encode_form_raw()  : repeated keys, no index suffixes, values left
                         unescaped (``status=a&status=b``).

A ``str`` params value is treated as already encoded and returned as-is.
``None`` values, and ``None`` items inside sequences, are skipped.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote, urlencode

from .models import PostEncoding, QueryParams


def format_scalar(value: Any) -> str:
    """Render a single parameter value the way FHIR servers expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _repeated_pairs(params: Mapping[str, Any]) -> Iterator[tuple[str, str]]:
    for key, value in params.items():
        if value is None:
            continue
        if _is_sequence(value):
            for item in value:
                if item is not None:
                    yield key, format_scalar(item)
        else:
            yield key, format_scalar(value)


def encode_query(params: QueryParams) -> str:
    """Encode params for a URL query string, repeating keys for multi-valued params."""
    if params is None:
        return ""
    if isinstance(params, str):
        return params
    return urlencode(list(_repeated_pairs(params)), quote_via=quote, safe="")


def encode_form(params: QueryParams) -> str:
    """Encode params as an ``application/x-www-form-urlencoded`` body, one pair per key."""
    if params is None:
        return ""
    if isinstance(params, str):
        return params
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if _is_sequence(value):
            value = ",".join(format_scalar(item) for item in value if item is not None)
        else:
            value = format_scalar(value)
        pairs.append((key, value))
    # quote_plus rules: "*" is escaped and "~" is not, the reverse of URLSearchParams
    return urlencode(pairs)


def encode_form_raw(params: QueryParams) -> str:
    """Encode params as a form body with repeated keys and no value escaping."""
    if params is None:
        return ""
    if isinstance(params, str):
        return params
    return "&".join(f"{key}={value}" for key, value in _repeated_pairs(params))


def encode_post_body(params: QueryParams, encoding: PostEncoding) -> str:
    """Dispatch to the form encoder selected by ``encoding``."""
    if PostEncoding(encoding) is PostEncoding.RAW:
        return encode_form_raw(params)
    return encode_form(params)
