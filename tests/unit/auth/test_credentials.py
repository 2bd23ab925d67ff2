"""Tests for credential and setting resolution.

CredentialResolver feeds both the API key lookup and PartsAPIConfig.from_env.
"""

import logging

import pytest

from parts_sdk.auth import CredentialResolver
from parts_sdk.auth.exceptions import CredentialFileError, CredentialNotFoundError


class TestCredentialResolverInit:
    """Test CredentialResolver initialization."""

    def test_init_default(self):
        resolver = CredentialResolver()
        assert resolver._dotenv_loaded

    def test_init_skip_dotenv(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_dotenv_values_reach_environment(self, tmp_path):
        """Values from the .env file become resolvable through the environment."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_BASE_URL=https://dotenv.example.com\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver.resolve(env_var_name="TEST_DOTENV_BASE_URL") == "https://dotenv.example.com"

    def test_dotenv_does_not_override_environment(self, tmp_path, monkeypatch):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_OVERRIDE=from-file\n")
        monkeypatch.setenv("TEST_DOTENV_OVERRIDE", "from-env")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))

        assert resolver.resolve(env_var_name="TEST_DOTENV_OVERRIDE") == "from-env"

    def test_dotenv_loaded_only_once(self, tmp_path):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_VAR=test_value\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        resolver._ensure_dotenv_loaded()
        resolver._ensure_dotenv_loaded()

        assert resolver._dotenv_loaded is True


class TestCredentialResolverPriority:
    """Test resolution priority ordering."""

    def test_explicit_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-value", env_var_name="TEST_PRIORITY_KEY", default="default-value")

        assert result == "explicit-value"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY2", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_PRIORITY_KEY2", default="default-value") == "env-value"

    def test_default_used_when_nothing_else_set(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_NONEXISTENT", default="default-value") == "default-value"

    def test_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_NONEXISTENT") is None

    def test_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="TEST_NONEXISTENT", required=True)

        assert "Required credential not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "TEST_NONEXISTENT"


class TestCredentialResolverFromFile:
    """Test file-based credential resolution."""

    def test_reads_and_strips_file(self, tmp_path):
        cred_file = tmp_path / "api_key.txt"
        cred_file.write_text("  file-credential-abc123  \n")

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(cred_file)) == "file-credential-abc123"

    def test_path_from_env_var(self, tmp_path, monkeypatch):
        cred_file = tmp_path / "secret.txt"
        cred_file.write_text("secret-from-env-path")
        monkeypatch.setenv("TEST_KEY_FILE", str(cred_file))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="TEST_KEY_FILE") == "secret-from-env-path"

    def test_tilde_expansion(self, tmp_path, monkeypatch):
        fake_home = tmp_path / "home"
        cred_file = fake_home / ".config" / "parts" / "api_key"
        cred_file.parent.mkdir(parents=True)
        cred_file.write_text("home-dir-credential")
        monkeypatch.setenv("HOME", str(fake_home))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="~/.config/parts/api_key") == "home-dir-credential"

    def test_missing_file_returns_none(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="/nonexistent/path/to/file.txt") is None

    def test_missing_file_raises_when_required(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError, match="not found"):
            resolver.resolve_from_file(file_path="/nonexistent/path/to/file.txt", required=True)

    def test_directory_instead_of_file(self, tmp_path):
        not_a_file = tmp_path / "dir_not_file"
        not_a_file.mkdir()
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(not_a_file)) is None
        with pytest.raises(CredentialFileError):
            resolver.resolve_from_file(file_path=str(not_a_file), required=True)

    def test_no_path_provided(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file() is None
        with pytest.raises(CredentialFileError, match="No file path provided"):
            resolver.resolve_from_file(required=True)


class TestResolveApiKey:
    """Test the PARTS_API_KEY / PARTS_API_KEY_FILE lookup."""

    def test_explicit_value_wins(self, monkeypatch):
        monkeypatch.setenv("PARTS_API_KEY", "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key("explicit-key") == "explicit-key"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PARTS_API_KEY", "env-key")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key() == "env-key"

    def test_from_key_file(self, tmp_path, monkeypatch):
        key_file = tmp_path / "parts_key"
        key_file.write_text("file-key\n")
        monkeypatch.setenv("PARTS_API_KEY_FILE", str(key_file))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key() == "file-key"

    def test_missing_returns_none(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_api_key() is None

    def test_missing_raises_when_required(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve_api_key(required=True)

        assert exc_info.value.env_var_name == "PARTS_API_KEY"
        assert "PARTS_API_KEY_FILE" in str(exc_info.value)


class TestCredentialMasking:
    """Test credential masking in logs."""

    def test_value_is_masked_in_debug_logs(self, caplog):
        caplog.set_level(logging.DEBUG)
        resolver = CredentialResolver(load_dotenv=False)

        resolver.resolve(value="super-secret-key-123")

        assert "super-secret-key-123" not in caplog.text
        assert "***" in caplog.text

    def test_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)
        resolver = CredentialResolver(load_dotenv=False)

        resolver.resolve(value="https://api.example.com", mask_in_logs=False)

        assert "https://api.example.com" in caplog.text

    def test_file_credentials_are_masked(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG)
        cred_file = tmp_path / "secret.txt"
        cred_file.write_text("file-secret-xyz")
        resolver = CredentialResolver(load_dotenv=False)

        resolver.resolve_from_file(file_path=str(cred_file))

        assert "file-secret-xyz" not in caplog.text
        assert "***" in caplog.text
