# src/curconv/domain/errors.py
"""
Domain Errors - Exceptions Raised by the Client and Credential Store

Three families of errors reach the command dispatcher:
- CredentialStoreError: the API key could not be read, written or removed
- TransportError: the request never produced a usable response
- ServiceError: the service answered with an error envelope
"""

from enum import Enum


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class CredentialStoreError(DomainError):
    """Base exception for credential store failures."""
    pass


class CredentialNotFoundError(CredentialStoreError):
    """Raised when no API key is stored and no environment fallback is set."""

    def __init__(self, message: str = "No API key set."):
        super().__init__(message)


class ConfigReadError(CredentialStoreError):
    """Raised when the config file exists but cannot be read."""

    def __init__(self, message: str = "Error reading config."):
        super().__init__(message)


class ConfigWriteError(CredentialStoreError):
    """Raised when the config file cannot be written."""

    def __init__(self, message: str = "Error writing config."):
        super().__init__(message)


class ConfigRemoveError(CredentialStoreError):
    """Raised when the config file cannot be deleted."""

    def __init__(self, message: str = "Error removing config."):
        super().__init__(message)


class ConfigParseError(CredentialStoreError):
    """Raised when the config file is not a valid {"api_key": ...} document."""

    def __init__(self, message: str = "JSON Parse Error."):
        super().__init__(message)


class ConfigDirectoryError(CredentialStoreError):
    """Raised when the platform config directory cannot be resolved or created."""

    def __init__(self, message: str = "Directory Error."):
        super().__init__(message)


class TransportError(DomainError):
    """Raised on network failure, timeout, or an unusable response."""
    pass


class ResponseDecodeError(TransportError):
    """Raised when a success response does not match the expected shape."""
    pass


class ServiceErrorKind(Enum):
    """
    Error kinds reported by the exchange rate service.

    Each member's value is the ``error-type`` string the service sends, except
    UNKNOWN_ERROR which covers everything else.
    """
    UNSUPPORTED_CURRENCY = "unsupported-code"
    MALFORMED_REQUEST = "malformed-request"
    INVALID_API_KEY = "invalid-key"
    INACTIVE_ACCOUNT = "inactive-account"
    QUOTA_REACHED = "quota-reached"
    UNKNOWN_ERROR = "unknown"

    @classmethod
    def from_error_type(cls, error_type: object) -> "ServiceErrorKind":
        """Map an ``error-type`` string to a kind; unrecognized values are UNKNOWN_ERROR."""
        for kind in cls:
            if kind is not cls.UNKNOWN_ERROR and kind.value == error_type:
                return kind
        return cls.UNKNOWN_ERROR

    @property
    def message(self) -> str:
        return _SERVICE_ERROR_MESSAGES[self]


_SERVICE_ERROR_MESSAGES = {
    ServiceErrorKind.UNSUPPORTED_CURRENCY: "Unsupported currency.",
    ServiceErrorKind.MALFORMED_REQUEST: "Malformed request.",
    ServiceErrorKind.INVALID_API_KEY: "Invalid API key.",
    ServiceErrorKind.INACTIVE_ACCOUNT: "Inactive account.",
    ServiceErrorKind.QUOTA_REACHED: "Quota reached.",
    ServiceErrorKind.UNKNOWN_ERROR: "Unknown error.",
}


class ServiceError(DomainError):
    """
    Raised when the service rejects a request.

    Attributes:
        kind: Classified error kind
        error_type: Raw ``error-type`` string, or None if the body was unreadable
    """

    def __init__(self, kind: ServiceErrorKind, error_type: object = None):
        super().__init__(kind.message)
        self.kind = kind
        self.error_type = error_type
