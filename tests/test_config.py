"""Tests for configuration loading."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from helpers import RequestRecorder

from onefichier import DEFAULT_BASE_URL, ConfigurationError, client_from_config, get_config


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's .env file out of the tests."""
    with patch("onefichier.config.load_dotenv"):
        yield


class TestGetConfig:
    """Tests for get_config."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FICHIER_API_KEY", "env_key")
        monkeypatch.delenv("FICHIER_BASE_URL", raising=False)

        config = get_config()

        assert config.api_key == "env_key"
        assert config.base_url == DEFAULT_BASE_URL

    def test_explicit_values_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FICHIER_API_KEY", "env_key")
        monkeypatch.setenv("FICHIER_BASE_URL", "http://env.example")

        config = get_config("arg_key", "http://arg.example")

        assert config.api_key == "arg_key"
        assert config.base_url == "http://arg.example"

    def test_base_url_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FICHIER_BASE_URL", "http://env.example")

        assert get_config("k").base_url == "http://env.example"

    def test_missing_api_key_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FICHIER_API_KEY", raising=False)

        with pytest.raises(ConfigurationError, match="FICHIER_API_KEY"):
            get_config()

    def test_config_is_frozen(self) -> None:
        config = get_config("k")

        with pytest.raises(AttributeError):
            config.api_key = "other"  # type: ignore[misc]


class TestClientFromConfig:
    """Tests for client_from_config."""

    async def test_builds_client(self, recorder: RequestRecorder) -> None:
        client = client_from_config(get_config("cfg_key", "http://localhost:9000/v1"))

        async with client:
            await client.list_vouchers()

        assert client.api_key == "cfg_key"
        assert recorder.last.headers["Authorization"] == "Bearer cfg_key"
        assert str(recorder.last.url) == "http://localhost:9000/v1/vouchers/ls.cgi"
