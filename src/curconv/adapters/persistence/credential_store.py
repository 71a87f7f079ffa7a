# src/curconv/adapters/persistence/credential_store.py
"""
Credential Store - API Key Persistence

This module stores the exchangerate-api.com key as ``{"api_key": "..."}`` in
``config.json`` under the platform config directory. When no file exists the
key is taken from an environment variable (``API_KEY`` by default).

Nothing is cached: every ``load()`` goes back to disk and the environment so
the key can be changed between commands.

Files that USE this module:
- curconv.adapters.providers.exchangerate_api (loads the key before each request)
- curconv.application.commands (key view/set/remove)
- curconv.app (wires the store)

Files that this module USES:
- curconv.config (config dir override and env var name)
- curconv.domain.errors (credential store errors)
"""
from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional

from curconv.config import settings
from curconv.domain.errors import (
    ConfigDirectoryError,
    ConfigParseError,
    ConfigReadError,
    ConfigRemoveError,
    ConfigWriteError,
    CredentialNotFoundError,
)

logger = logging.getLogger(__name__)

APP_NAME = "CurrencyConverter"
CONFIG_FILE_NAME = "config.json"


def default_config_dir() -> Path:
    """
    Resolve the per-user config directory for this application.

    - Linux: $XDG_CONFIG_HOME/currencyconverter (default ~/.config/currencyconverter)
    - macOS: ~/Library/Application Support/CurrencyConverter
    - Windows: %APPDATA%\\CurrencyConverter\\config

    Raises:
        ConfigDirectoryError: If no home directory can be determined
    """
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigDirectoryError() from e

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / APP_NAME / "config"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    # XDG spec: relative paths are invalid and must be ignored
    base = Path(xdg) if xdg and os.path.isabs(xdg) else home / ".config"
    return base / APP_NAME.lower()


class CredentialStore:
    """Read, write and remove the API key."""

    def __init__(self, config_dir: Optional[Path] = None, env_var: Optional[str] = None):
        """
        Initialize credential store.

        Args:
            config_dir: Directory holding config.json (defaults to settings.config_dir,
                then the platform config directory)
            env_var: Environment variable consulted when config.json is absent
                (defaults to settings.credential_env_var)
        """
        self._config_dir = config_dir or settings.config_dir
        self.env_var = env_var or settings.credential_env_var

    @property
    def config_dir(self) -> Path:
        if self._config_dir is not None:
            return Path(self._config_dir)
        return default_config_dir()

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def load(self) -> str:
        """
        Return the current API key.

        Returns:
            API key from config.json, or from the environment if the file is absent

        Raises:
            CredentialNotFoundError: If neither source has a key
            ConfigReadError: If config.json exists but cannot be read or is not UTF-8
            ConfigParseError: If config.json is not a valid config document
        """
        path = self.config_file
        if not path.exists():
            api_key = os.environ.get(self.env_var)
            if api_key is None:
                raise CredentialNotFoundError()
            logger.debug("Using API key from environment variable %s", self.env_var)
            return api_key

        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read config file %s: %s", path, e)
            raise ConfigReadError() from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Config file %s is not valid JSON: %s", path, e)
            raise ConfigParseError() from e

        api_key = data.get("api_key") if isinstance(data, dict) else None
        if not isinstance(api_key, str):
            logger.error("Config file %s has no string 'api_key' field", path)
            raise ConfigParseError()
        return api_key

    def save(self, api_key: str) -> None:
        """
        Persist the API key, replacing any existing config.json.

        Uses temporary file + atomic rename so a crash never leaves a half-written file.

        Raises:
            ConfigDirectoryError: If the config directory cannot be created
            ConfigWriteError: If the file cannot be written
        """
        config_dir = self.config_dir
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create config directory %s: %s", config_dir, e)
            raise ConfigDirectoryError() from e

        try:
            temp_fd, temp_path = tempfile.mkstemp(
                suffix=".json.tmp",
                dir=str(config_dir),
                text=True,
            )
        except OSError as e:
            logger.error("Failed to create temp file in %s: %s", config_dir, e)
            raise ConfigWriteError() from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump({"api_key": api_key}, f)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, str(self.config_file))
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            logger.error("Failed to write config file %s: %s", self.config_file, e)
            raise ConfigWriteError() from e

        logger.info("API key saved to %s", self.config_file)

    def remove(self) -> None:
        """
        Delete config.json.

        Raises:
            CredentialNotFoundError: If there is no config file to remove
            ConfigRemoveError: If the file exists but cannot be deleted
        """
        path = self.config_file
        if not path.exists():
            raise CredentialNotFoundError()

        try:
            path.unlink()
        except OSError as e:
            logger.error("Failed to remove config file %s: %s", path, e)
            raise ConfigRemoveError() from e

        logger.info("API key removed from %s", path)
