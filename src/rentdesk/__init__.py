"""Rentdesk Python client - authenticated access to the Rentdesk backend API."""

from .client import BackendClient, response_payload
from .config import (
    DEFAULT_HEADERS,
    HEADER_AUTHORIZATION,
    HEADER_AUTHORIZATION_UID,
    RENTDESK_API_BASE_URL,
    RENTDESK_API_TIMEOUT,
    ClientConfig,
)
from .diagnostics import DiagnosticSink, LoggingDiagnosticSink, RecordingDiagnosticSink
from .exceptions import (
    ApiError,
    BackendConnectionError,
    CredentialUnavailableError,
    RentdeskError,
    TransportError,
)
from .identity import IdentityProvider, StaticIdentityProvider
from .interceptors import CredentialAttacher, ResponseClassifier, classify_status
from .landlord import LandlordAPI
from .models import DiagnosticRecord, Identity
from .types import ErrorClass, HttpMethod

__version__ = "0.1.0"

__all__ = [
    # Clients
    "BackendClient",
    "LandlordAPI",
    "response_payload",
    # Configuration
    "ClientConfig",
    "DEFAULT_HEADERS",
    "HEADER_AUTHORIZATION",
    "HEADER_AUTHORIZATION_UID",
    "RENTDESK_API_BASE_URL",
    "RENTDESK_API_TIMEOUT",
    # Identity
    "Identity",
    "IdentityProvider",
    "StaticIdentityProvider",
    # Pipeline
    "CredentialAttacher",
    "ResponseClassifier",
    "classify_status",
    # Diagnostics
    "DiagnosticRecord",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "RecordingDiagnosticSink",
    # Types
    "ErrorClass",
    "HttpMethod",
    # Exceptions
    "RentdeskError",
    "ApiError",
    "TransportError",
    "BackendConnectionError",
    "CredentialUnavailableError",
]
