"""Custom exceptions for the Rentdesk API client."""

from typing import Any

import httpx


class RentdeskError(Exception):
    """Base exception for all Rentdesk client errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiError(RentdeskError):
    """Raised when the backend answers with a non-2xx status.

    Carries the decoded response payload so callers can inspect what the
    backend reported.
    """

    def __init__(
        self,
        status_code: int,
        payload: Any = None,
        response: httpx.Response | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"Request failed with status code {status_code}", status_code=status_code)
        self.payload = payload
        self.response = response


class TransportError(RentdeskError):
    """Raised when no response was received (connection refused, DNS, timeout)."""

    payload = None

    def __init__(self, message: str = "Network Error") -> None:
        super().__init__(message, status_code=None)


class BackendConnectionError(RentdeskError):
    """Raised by ``test_connection`` when the backend status probe fails."""


class CredentialUnavailableError(RentdeskError):
    """Raised by an identity provider that cannot issue a credential."""
