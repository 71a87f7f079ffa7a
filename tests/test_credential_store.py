# tests/test_credential_store.py
"""
Credential Store Tests - Unit Tests for API Key Persistence

Tests reading, writing and removing config.json, the environment variable
fallback, error mapping for broken files, and platform directory resolution.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- curconv.adapters.persistence.credential_store (CredentialStore, default_config_dir)
- curconv.domain.errors (expected exceptions)
- pytest (testing framework, tmp_path and monkeypatch fixtures)
"""
import json
from pathlib import Path

import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Patching filesystem calls to simulate failures

from curconv.adapters.persistence import credential_store as credential_store_module
from curconv.adapters.persistence.credential_store import CredentialStore, default_config_dir
from curconv.domain.errors import (
    ConfigDirectoryError,
    ConfigParseError,
    ConfigReadError,
    ConfigRemoveError,
    ConfigWriteError,
    CredentialNotFoundError,
)


class TestLoad:
    def test_not_found_without_file_or_env(self, store):
        with pytest.raises(CredentialNotFoundError, match="No API key set."):
            store.load()

    def test_env_fallback(self, store, monkeypatch):
        monkeypatch.setenv("CURCONV_TEST_API_KEY", "from-env")
        assert store.load() == "from-env"

    def test_env_read_at_call_time(self, store, monkeypatch):
        monkeypatch.setenv("CURCONV_TEST_API_KEY", "first")
        assert store.load() == "first"
        monkeypatch.setenv("CURCONV_TEST_API_KEY", "second")
        assert store.load() == "second"

    def test_file_wins_over_env(self, store, monkeypatch):
        monkeypatch.setenv("CURCONV_TEST_API_KEY", "from-env")
        store.save("from-file")
        assert store.load() == "from-file"

    def test_invalid_json(self, store):
        store.config_dir.mkdir(parents=True)
        store.config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="JSON Parse Error."):
            store.load()

    def test_missing_api_key_field(self, store):
        store.config_dir.mkdir(parents=True)
        store.config_file.write_text(json.dumps({"key": "x"}), encoding="utf-8")

        with pytest.raises(ConfigParseError):
            store.load()

    def test_non_object_document(self, store):
        store.config_dir.mkdir(parents=True)
        store.config_file.write_text(json.dumps(["x"]), encoding="utf-8")

        with pytest.raises(ConfigParseError):
            store.load()

    def test_non_utf8_file(self, store):
        store.config_dir.mkdir(parents=True)
        store.config_file.write_bytes(b'{"api_key": "\xff\xfe"}')

        with pytest.raises(ConfigReadError, match="Error reading config."):
            store.load()

    def test_unreadable_file(self, store):
        store.save("abc")

        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigReadError, match="Error reading config."):
                store.load()


class TestSave:
    def test_writes_single_field_document(self, store):
        store.save("abc123")

        assert json.loads(store.config_file.read_text(encoding="utf-8")) == {"api_key": "abc123"}
        assert store.config_file.name == "config.json"

    def test_overwrites_existing_key(self, store):
        store.save("old")
        store.save("new")

        assert store.load() == "new"
        assert [p.name for p in store.config_dir.iterdir()] == ["config.json"]

    def test_directory_error(self, store):
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigDirectoryError, match="Directory Error."):
                store.save("abc")

    def test_write_error_leaves_no_temp_file(self, store):
        store.config_dir.mkdir(parents=True)

        with patch.object(credential_store_module.os, "replace", side_effect=OSError("disk full")):
            with pytest.raises(ConfigWriteError, match="Error writing config."):
                store.save("abc")

        assert list(store.config_dir.iterdir()) == []


class TestRemove:
    def test_remove_existing(self, store):
        store.save("abc")

        store.remove()

        assert not store.config_file.exists()
        with pytest.raises(CredentialNotFoundError):
            store.load()

    def test_remove_missing(self, store):
        with pytest.raises(CredentialNotFoundError):
            store.remove()

    def test_remove_does_not_touch_env(self, store, monkeypatch):
        monkeypatch.setenv("CURCONV_TEST_API_KEY", "from-env")
        store.save("from-file")

        store.remove()

        assert store.load() == "from-env"

    def test_remove_failure(self, store):
        store.save("abc")

        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigRemoveError, match="Error removing config."):
                store.remove()


class TestDefaultConfigDir:
    def test_linux_default(self, monkeypatch, tmp_path):
        monkeypatch.setattr(credential_store_module.sys, "platform", "linux")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert default_config_dir() == tmp_path / ".config" / "currencyconverter"

    def test_linux_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setattr(credential_store_module.sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        assert default_config_dir() == tmp_path / "xdg" / "currencyconverter"

    def test_linux_relative_xdg_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setattr(credential_store_module.sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert default_config_dir() == tmp_path / ".config" / "currencyconverter"

    def test_macos(self, monkeypatch, tmp_path):
        monkeypatch.setattr(credential_store_module.sys, "platform", "darwin")
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert default_config_dir() == (
            tmp_path / "Library" / "Application Support" / "CurrencyConverter"
        )

    def test_windows(self, monkeypatch, tmp_path):
        monkeypatch.setattr(credential_store_module.sys, "platform", "win32")
        monkeypatch.setenv("APPDATA", str(tmp_path))

        assert default_config_dir() == tmp_path / "CurrencyConverter" / "config"

    def test_no_home(self, monkeypatch):
        def no_home(cls):
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(credential_store_module.sys, "platform", "linux")
        monkeypatch.setattr(Path, "home", classmethod(no_home))

        with pytest.raises(ConfigDirectoryError):
            default_config_dir()

    def test_store_uses_platform_dir_when_unset(self, monkeypatch, tmp_path):
        monkeypatch.setattr(credential_store_module.settings, "config_dir", None)
        monkeypatch.setattr(
            credential_store_module, "default_config_dir", lambda: tmp_path / "platform"
        )

        store = CredentialStore()

        assert store.config_file == tmp_path / "platform" / "config.json"
