"""Unit tests for client configuration."""

import pytest
from pydantic import ValidationError

from rentdesk import DEFAULT_HEADERS, RENTDESK_API_BASE_URL, RENTDESK_API_TIMEOUT, ClientConfig


def test_defaults() -> None:
    config = ClientConfig()

    assert config.base_url == ""
    assert config.headers == {"Content-Type": "application/json"}
    assert config.timeout == 30.0


def test_from_env() -> None:
    config = ClientConfig.from_env(
        {
            RENTDESK_API_BASE_URL: "https://rentdesk.example.com/api/",
            RENTDESK_API_TIMEOUT: "5",
        }
    )

    assert config.base_url == "https://rentdesk.example.com/api"
    assert config.timeout == 5.0
    assert config.headers == DEFAULT_HEADERS


def test_from_env_missing_base_url_not_validated() -> None:
    config = ClientConfig.from_env({})

    assert config.base_url == ""


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv(RENTDESK_API_BASE_URL, "http://localhost:5000/api")
    monkeypatch.delenv(RENTDESK_API_TIMEOUT, raising=False)

    config = ClientConfig.from_env()

    assert config.base_url == "http://localhost:5000/api"
    assert config.timeout == 30.0


def test_config_is_frozen() -> None:
    config = ClientConfig(base_url="http://localhost:5000/api")

    with pytest.raises(ValidationError):
        config.base_url = "http://elsewhere"


def test_default_headers_not_shared() -> None:
    config = ClientConfig()

    assert config.headers == DEFAULT_HEADERS
    assert config.headers is not DEFAULT_HEADERS
