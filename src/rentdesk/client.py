"""Main client for the Rentdesk API."""

import logging
from typing import Any, Optional, Union

import httpx

from .config import ClientConfig
from .diagnostics import DiagnosticSink
from .exceptions import ApiError, BackendConnectionError, TransportError
from .identity import IdentityProvider
from .interceptors import CredentialAttacher, ResponseClassifier
from .types import HttpMethod

logger = logging.getLogger(__name__)


def _to_value(v: Any) -> Any:
    """Extract string value from an enum member, or return string as-is."""
    return v.value if hasattr(v, "value") else v


def response_payload(response: httpx.Response) -> Any:
    """Decoded JSON body, falling back to text; None for an empty body."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class BackendClient:
    """
    Async client for the Rentdesk backend.

    Every request gets the signed-in user's bearer credential attached, and
    every failure is classified and reported before it reaches the caller.

    Usage:
        config = ClientConfig.from_env()
        provider = StaticIdentityProvider()

        async with BackendClient(config, provider) as client:
            status = await client.test_connection()

            provider.sign_in(Identity(uid="landlord_1"), id_token)
            response = await client.get("/landlord/properties")
    """

    def __init__(
        self,
        config: ClientConfig,
        identity_provider: IdentityProvider,
        *,
        diagnostic_sink: Optional[DiagnosticSink] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Base URL, default headers and transport timeout
            identity_provider: Source of the signed-in identity and its credentials
            diagnostic_sink: Receives classified failures (default: logging)
            transport: Custom httpx transport, mainly for tests
        """
        self.config = config
        self.identity_provider = identity_provider
        self.credential_attacher = CredentialAttacher(identity_provider)
        self.response_classifier = ResponseClassifier(diagnostic_sink)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "BackendClient":
        """Async context manager entry."""
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self.config.headers,
            timeout=self.config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is initialized."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async with context manager.")
        return self._client

    async def request(
        self,
        method: Union[str, HttpMethod],
        path: str,
        *,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a request through the credential and classification pipeline.

        Args:
            method: HTTP method
            path: API path, relative to the configured base URL
            json: JSON body
            params: Query parameters

        Returns:
            The successful response, untouched

        Raises:
            ApiError: Backend answered with a non-2xx status
            TransportError: No response was received
            Exception: Whatever the identity provider raised while fetching a credential,
                or whatever failed while building the request (e.g. an unencodable body)
        """
        client = self._ensure_client()
        request: Optional[httpx.Request] = None

        try:
            request = client.build_request(_to_value(method), path, json=json, params=params)
            request = await self.credential_attacher(request)
            logger.debug("%s %s", request.method, request.url)

            try:
                response = await client.send(request)
            except httpx.HTTPError as e:
                raise TransportError(str(e) or type(e).__name__) from e

            if not response.is_success:
                raise ApiError(response.status_code, response_payload(response), response)

            return response

        except Exception as e:
            self.response_classifier.observe(e, request)
            raise

    async def get(self, path: str, *, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self.request(HttpMethod.GET, path, params=params)

    async def post(self, path: str, json: Any = None, *, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self.request(HttpMethod.POST, path, json=json, params=params)

    async def put(self, path: str, json: Any = None, *, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self.request(HttpMethod.PUT, path, json=json, params=params)

    async def patch(self, path: str, json: Any = None, *, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self.request(HttpMethod.PATCH, path, json=json, params=params)

    async def delete(self, path: str, *, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self.request(HttpMethod.DELETE, path, params=params)

    # Diagnostic probes

    async def test_connection(self) -> Any:
        """
        Probe ``GET /status``.

        Returns:
            Status payload

        Raises:
            BackendConnectionError: Probe failed. Only the original message is
                kept; status code and payload are not.
        """
        try:
            response = await self.get("/status")
            return response_payload(response)
        except Exception as e:
            logger.error("Failed to connect to backend: %s", e)
            raise BackendConnectionError(f"Backend connection failed: {e}") from None

    async def health_check(self) -> Any:
        """
        Probe ``GET /health``.

        Returns:
            Health payload

        Raises:
            The original failure, unchanged
        """
        try:
            response = await self.get("/health")
            return response_payload(response)
        except Exception as e:
            logger.error("Backend health check failed: %s", e)
            raise
