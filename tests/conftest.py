# tests/conftest.py
"""
Shared Test Fixtures

Sample exchangerate-api.com payloads and helpers for building mocked
``requests`` responses.

Files that USE this module:
- pytest (fixtures are injected into all test modules)

Files that this module USES:
- curconv.adapters.persistence.credential_store (CredentialStore fixture)
- unittest.mock (Mock responses and credential sources)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock objects for responses and credential sources

from curconv.adapters.persistence.credential_store import CredentialStore  # File-backed key store

TEST_API_KEY = "test-key-1234"
TEST_BASE_URL = "https://api.test/v6"
TEST_TIMEOUT = 5

FRESHNESS_FIELDS = {
    "time-last-update-unix": 1700000001,
    "time-last-update-utc": "Wed, 15 Nov 2023 00:00:01 +0000",
    "time-next-update-unix": 1700086401,
    "time-next-update-utc": "Thu, 16 Nov 2023 00:00:01 +0000",
}


def envelope(base_code: str, **extra) -> dict:
    data = {
        "result": "success",
        "documentation": "https://www.exchangerate-api.com/docs",
        "terms-of-use": "https://www.exchangerate-api.com/terms",
        **FRESHNESS_FIELDS,
        "base-code": base_code,
    }
    data.update(extra)
    return data


def make_response(status_code: int = 200, json_data=None, json_error: Exception = None) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp


@pytest.fixture
def latest_usd_payload() -> dict:
    return envelope(
        "USD",
        **{"conversion-rates": {"USD": 1, "EUR": 0.9013, "GBP": 0.7868, "JPY": 149.52}},
    )


@pytest.fixture
def pair_payload() -> dict:
    return envelope("USD", **{"target-code": "EUR", "conversion-rate": 0.9013})


@pytest.fixture
def conversion_payload() -> dict:
    return envelope(
        "USD",
        **{"target-code": "EUR", "conversion-rate": 0.9013, "conversion-result": 90.13},
    )


@pytest.fixture
def key_source() -> Mock:
    source = Mock()
    source.load.return_value = TEST_API_KEY
    return source


@pytest.fixture
def store(tmp_path, monkeypatch) -> CredentialStore:
    monkeypatch.delenv("CURCONV_TEST_API_KEY", raising=False)
    return CredentialStore(config_dir=tmp_path / "config", env_var="CURCONV_TEST_API_KEY")
