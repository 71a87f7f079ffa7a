# src/curconv/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains the file-backed API key store.
"""

from curconv.adapters.persistence.credential_store import CredentialStore, default_config_dir

__all__ = [
    "CredentialStore",
    "default_config_dir",
]
