"""Tests for reading configuration from the environment."""

from token_refresh.config import load_credentials, load_token_timeout
from token_refresh.types import ClientCredentials


class TestLoadCredentials:

    def test_reads_from_mapping(self):
        creds = load_credentials({"SPOTIFY_CLIENT_ID": "id", "SPOTIFY_CLIENT_SECRET": "secret"})

        assert creds == ClientCredentials(client_id="id", client_secret="secret")

    def test_reads_from_process_environment(self, spotify_env):
        creds = load_credentials()

        assert creds.client_id == "test-client-id"
        assert creds.client_secret == "test-client-secret"

    def test_missing_values_become_empty(self, capsys):
        creds = load_credentials({})

        assert creds == ClientCredentials(client_id="", client_secret="")
        assert "SPOTIFY_CLIENT_ID" in capsys.readouterr().out

    def test_warning_never_prints_secret(self, capsys):
        load_credentials({"SPOTIFY_CLIENT_SECRET": "super-secret"})

        assert "super-secret" not in capsys.readouterr().out


class TestLoadTokenTimeout:

    def test_unset_means_no_timeout(self):
        assert load_token_timeout({}) is None

    def test_parses_seconds(self):
        assert load_token_timeout({"SPOTIFY_TOKEN_TIMEOUT": "2.5"}) == 2.5

    def test_invalid_value_is_ignored(self, capsys):
        assert load_token_timeout({"SPOTIFY_TOKEN_TIMEOUT": "soon"}) is None
        assert "SPOTIFY_TOKEN_TIMEOUT" in capsys.readouterr().out
