"""Pytest configuration and fixtures for rentdesk tests."""

import pytest

from rentdesk import (
    BackendClient,
    ClientConfig,
    Identity,
    RecordingDiagnosticSink,
    StaticIdentityProvider,
)


class CountingIdentityProvider(StaticIdentityProvider):
    """Issues a new credential on every fetch."""

    def __init__(self, identity: Identity | None = None):
        super().__init__(identity, "unused")
        self.fetch_count = 0

    async def fetch_credential(self, identity: Identity) -> str:
        await super().fetch_credential(identity)
        self.fetch_count += 1
        return f"token-{self.fetch_count}"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return "http://test.rentdesk.local/api"


@pytest.fixture
def config(base_url: str) -> ClientConfig:
    """Test client configuration."""
    return ClientConfig(base_url=base_url)


@pytest.fixture
def identity() -> Identity:
    """Signed-in landlord."""
    return Identity(uid="uid_landlord_1", email="landlord@example.com")


@pytest.fixture
def provider() -> StaticIdentityProvider:
    """Identity provider with nobody signed in."""
    return StaticIdentityProvider()


@pytest.fixture
def sink() -> RecordingDiagnosticSink:
    """Diagnostic sink that keeps records for assertions."""
    return RecordingDiagnosticSink()


@pytest.fixture
def client(config: ClientConfig, provider: StaticIdentityProvider, sink: RecordingDiagnosticSink) -> BackendClient:
    """Create test client."""
    return BackendClient(config, provider, diagnostic_sink=sink)


@pytest.fixture
def counting_provider(identity: Identity) -> CountingIdentityProvider:
    """Signed-in provider that numbers its credentials."""
    return CountingIdentityProvider(identity)
