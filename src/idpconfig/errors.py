"""Exception types raised by the identity provider configuration client."""

from __future__ import annotations
import httpx


class IdpConfigError(Exception):
    """Base class for errors raised by :mod:`idpconfig`."""


class InvalidArgumentError(IdpConfigError, ValueError):
    """Raised when a caller supplies an argument that fails validation."""


class ApiRequestError(IdpConfigError, RuntimeError):
    """Raised when a provider configuration request cannot be completed."""

    def __init__(self, message: str, *, response: httpx.Response | None = None) -> None:
        """Initialise the error with optional HTTP response context."""
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int | None:
        """Return the HTTP status code of the failed response, if any."""
        if self.response is None:
            return None
        return self.response.status_code


__all__ = ["ApiRequestError", "IdpConfigError", "InvalidArgumentError"]
