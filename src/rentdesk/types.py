"""Type definitions and enums for the Rentdesk API client."""

from enum import Enum


class ErrorClass(str, Enum):
    """Diagnostic category assigned to a failed request."""

    AUTHENTICATION = "authentication_error"  # 401, credential invalid or expired
    AUTHORIZATION = "authorization_error"  # 403, identity lacks permission
    SERVER = "server_error"  # 5xx, backend-side failure
    GENERIC = "generic_error"  # everything else, including no response


class HttpMethod(str, Enum):
    """HTTP methods exposed by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

