# where: wordpress/tools/errors.py
# what: Exception types raised by the WordPress tools.
# why: Lets the tool boundary tell configuration, remote, and dispatch failures apart.

from __future__ import annotations


class WordPressConfigurationError(ValueError):
    """Raised when provider credentials are missing or malformed."""


class WordPressHttpError(RuntimeError):
    """Raised when the WordPress REST API returns an error response."""

    def __init__(self, status_code: int | None, message: str, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class UnknownOperationError(LookupError):
    """Raised when a tool name is not one of the supported operations."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
