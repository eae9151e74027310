"""Exception types raised by the vault connector."""

from __future__ import annotations


class DSVaultError(Exception):
    pass


class ConfigurationError(DSVaultError):
    """A resource descriptor or local setting cannot be used."""


class RemoteError(DSVaultError):
    """The vault service answered with an error or an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class InvalidNameError(DSVaultError, ValueError):
    """An object name cannot be turned into a request path."""
