from .async_client import AsyncFHIRClient
from .base_client import BaseFHIRClient
from .client import FHIRClient
from .config import FHIRSettings
from .errors import ArgumentError, SchemaError
from .mapping import map_fhir_data, map_fhir_response
from .models import AuthOptions, FHIRRequest, PostEncoding

__all__ = [
    "AsyncFHIRClient",
    "BaseFHIRClient",
    "FHIRClient",
    "FHIRSettings",
    "ArgumentError",
    "SchemaError",
    "map_fhir_data",
    "map_fhir_response",
    "AuthOptions",
    "FHIRRequest",
    "PostEncoding",
]
