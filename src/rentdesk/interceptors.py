"""
Request and response interceptors.

Every request a ``BackendClient`` sends passes through:
1. ``CredentialAttacher`` before transmission
2. ``ResponseClassifier`` when the request fails for any reason

Neither keeps state between requests.
"""
import logging
from typing import Optional

import httpx

from .config import HEADER_AUTHORIZATION, HEADER_AUTHORIZATION_UID
from .diagnostics import DiagnosticSink, LoggingDiagnosticSink
from .exceptions import ApiError
from .identity import IdentityProvider
from .models import DiagnosticRecord
from .types import ErrorClass

logger = logging.getLogger(__name__)


def classify_status(status_code: Optional[int]) -> ErrorClass:
    """
    Map a failure status code to its diagnostic class.

    Checked in order: 401, 403, 5xx. Anything else, including a failure with
    no response at all, is generic.
    """
    if status_code == 401:
        return ErrorClass.AUTHENTICATION
    if status_code == 403:
        return ErrorClass.AUTHORIZATION
    if status_code is not None and status_code >= 500:
        return ErrorClass.SERVER
    return ErrorClass.GENERIC


class CredentialAttacher:
    """Stamps the signed-in identity's bearer credential onto outgoing requests."""

    def __init__(self, identity_provider: IdentityProvider):
        self.identity_provider = identity_provider

    async def __call__(self, request: httpx.Request) -> httpx.Request:
        """
        Attach credential headers to the request.

        Requests made while nobody is signed in go out untouched. Otherwise a
        fresh credential is fetched, once, for this request only; if the fetch
        raises, the exception propagates and the request is never sent.

        Args:
            request: Outgoing request

        Returns:
            The same request object
        """
        identity = self.identity_provider.get_current_identity()
        if identity is None:
            return request

        credential = await self.identity_provider.fetch_credential(identity)
        request.headers[HEADER_AUTHORIZATION] = f"Bearer {credential}"
        request.headers[HEADER_AUTHORIZATION_UID] = identity.uid
        logger.debug("Attached credential for %s to %s %s", identity.uid, request.method, request.url)
        return request


class ResponseClassifier:
    """
    Classifies failed requests and reports them to a diagnostic sink.

    Observation only: the caller re-raises the failure after ``observe``
    returns, and nothing here changes which exception that is.
    """

    def __init__(self, sink: Optional[DiagnosticSink] = None):
        self.sink = sink or LoggingDiagnosticSink()

    def classify(self, error: BaseException, request: Optional[httpx.Request] = None) -> DiagnosticRecord:
        status_code = error.status_code if isinstance(error, ApiError) else None
        payload = getattr(error, "payload", None)
        return DiagnosticRecord(
            error_class=classify_status(status_code),
            status_code=status_code,
            detail=payload if payload else str(error),
            method=request.method if request is not None else None,
            url=str(request.url) if request is not None else None,
        )

    def observe(self, error: BaseException, request: Optional[httpx.Request] = None) -> DiagnosticRecord:
        record = self.classify(error, request)
        try:
            self.sink.emit(record)
        except Exception:
            logger.exception("Diagnostic sink failed while reporting %s", record.error_class)
        return record
