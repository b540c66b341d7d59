"""Esquire exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from esquire.result import Response


class EsquireError(Exception):
    """Base exception for all Esquire errors."""


class InvalidInputError(EsquireError):
    """Raised when a value of an unsupported type is handed to the builder."""


class InvalidOptionError(EsquireError):
    """Raised when a request option is not allowed or was never set."""


class UnsupportedConversionError(EsquireError):
    """Raised when a search is requested from an arbitrary searchable object."""


class ConnectionError(EsquireError):
    """Raised when the transport cannot reach the search service."""


class ResponseError(EsquireError):
    """Raised when the search service answers with a non-2xx status."""

    def __init__(self, message: str, response: Response) -> None:
        super().__init__(message)
        self.response = response


class ConfigurationError(EsquireError):
    """Raised when client configuration is invalid."""
