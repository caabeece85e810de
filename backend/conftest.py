"""Shared fixtures for the token refresh tests."""

from unittest.mock import Mock

import pytest

from token_refresh.types import ClientCredentials


@pytest.fixture
def credentials() -> ClientCredentials:
    return ClientCredentials(client_id="test-client-id", client_secret="test-client-secret")


@pytest.fixture
def spotify_env(monkeypatch):
    """Fake Spotify app credentials in the process environment."""
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("SPOTIFY_CLIENT_SECRET", "test-client-secret")
    monkeypatch.delenv("SPOTIFY_TOKEN_TIMEOUT", raising=False)


@pytest.fixture
def make_spotify_response():
    """Build a requests.Response stand-in as returned by requests.post."""

    def _make(payload=None, status_code: int = 200, json_error: Exception | None = None) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.ok = status_code < 400
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response

    return _make
