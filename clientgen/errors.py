"""Exceptions raised by clientgen."""

from __future__ import annotations


class ClientGenError(Exception):
    """Base class for all clientgen failures."""


class MalformedTemplateError(ClientGenError):
    """A URL template contains a token where the grammar forbids it."""

    def __init__(self, token: str, position: int | None = None) -> None:
        self.token = token
        self.position = position
        if position is None:
            message = f"Unexpected token {token}"
        else:
            message = f"Unexpected token {token} at position {position}"
        super().__init__(message)


class SchemaLoadError(ClientGenError):
    """A schema document could not be turned into a Schema tree."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
