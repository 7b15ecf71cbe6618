from __future__ import annotations

"""Error hierarchy for request handling.

- StatesApiError: base for all errors rendered as ``{"message": ...}``
- ValidationError: malformed or missing input (400)
- NotFoundError: no matching data (404)
"""


class StatesApiError(Exception):
    """Base exception carrying a client-facing message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StatesApiError):
    """Missing or malformed request input."""

    status_code = 400


class NotFoundError(StatesApiError):
    """The requested state, property, or fun fact does not exist."""

    status_code = 404
