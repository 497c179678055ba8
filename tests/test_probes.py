"""Unit tests for the status and health probes."""

import httpx
import pytest
import respx
from httpx import Response

from rentdesk import (
    ApiError,
    BackendClient,
    BackendConnectionError,
    ErrorClass,
    RecordingDiagnosticSink,
    TransportError,
)


@pytest.mark.asyncio
@respx.mock
async def test_test_connection_returns_payload(client: BackendClient, base_url: str) -> None:
    """Test status probe resolves to the payload only."""
    respx.get(f"{base_url}/status").mock(return_value=Response(200, json={"status": "ok", "version": "1.4.0"}))

    async with client:
        result = await client.test_connection()

    assert result == {"status": "ok", "version": "1.4.0"}


@pytest.mark.asyncio
@respx.mock
async def test_health_check_returns_payload(client: BackendClient, base_url: str) -> None:
    """Test health probe resolves to the payload only."""
    respx.get(f"{base_url}/health").mock(return_value=Response(200, json={"healthy": True}))

    async with client:
        result = await client.health_check()

    assert result == {"healthy": True}


@pytest.mark.asyncio
@respx.mock
async def test_test_connection_wraps_failure(
    client: BackendClient, sink: RecordingDiagnosticSink, base_url: str
) -> None:
    """Test status probe failure is rewrapped with the original message only."""
    respx.get(f"{base_url}/status").mock(return_value=Response(503, json={"error": "maintenance"}))

    with pytest.raises(BackendConnectionError) as exc_info:
        async with client:
            await client.test_connection()

    error = exc_info.value
    assert str(error) == "Backend connection failed: Request failed with status code 503"
    assert error.status_code is None
    assert not hasattr(error, "payload")
    assert error.__cause__ is None
    assert [r.error_class for r in sink.records] == [ErrorClass.SERVER]


@pytest.mark.asyncio
@respx.mock
async def test_test_connection_wraps_transport_failure(client: BackendClient, base_url: str) -> None:
    """Test status probe wraps a network failure too."""
    respx.get(f"{base_url}/status").mock(side_effect=httpx.ConnectError("Connection refused"))

    with pytest.raises(BackendConnectionError) as exc_info:
        async with client:
            await client.test_connection()

    assert str(exc_info.value).startswith("Backend connection failed: ")
    assert str(exc_info.value).endswith("Connection refused")


@pytest.mark.asyncio
@respx.mock
async def test_health_check_passes_failure_through(
    client: BackendClient, sink: RecordingDiagnosticSink, base_url: str
) -> None:
    """Test health probe failure reaches the caller unchanged."""
    respx.get(f"{base_url}/health").mock(return_value=Response(503, json={"error": "maintenance"}))

    with pytest.raises(ApiError) as exc_info:
        async with client:
            await client.health_check()

    error = exc_info.value
    assert error.status_code == 503
    assert error.payload == {"error": "maintenance"}
    assert not isinstance(error, BackendConnectionError)
    assert [r.error_class for r in sink.records] == [ErrorClass.SERVER]


@pytest.mark.asyncio
@respx.mock
async def test_health_check_passes_transport_failure_through(client: BackendClient, base_url: str) -> None:
    """Test health probe re-raises a network failure as is."""
    respx.get(f"{base_url}/health").mock(side_effect=httpx.ConnectError("Connection refused"))

    with pytest.raises(TransportError):
        async with client:
            await client.health_check()


@pytest.mark.asyncio
@respx.mock
async def test_probes_carry_credentials(client: BackendClient, provider, identity, base_url: str) -> None:
    """Test probes go through the same credential pipeline."""
    route = respx.get(f"{base_url}/health").mock(return_value=Response(200, json={"healthy": True}))
    provider.sign_in(identity, "id-token-abc")

    async with client:
        await client.health_check()

    assert route.calls.last.request.headers["Authorization"] == "Bearer id-token-abc"
