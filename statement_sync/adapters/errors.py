"""Project-native typed exceptions for adapter failures."""

from __future__ import annotations


class StatementParseError(Exception):
    """Malformed CSV structure or stream I/O failure while reading a statement."""


class NotionWriteError(Exception):
    """Base exception for page-creation failures against the Notion API.

    Attributes:
        error_code: Optional upstream Notion error code.
    """

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class NotionConnectionError(NotionWriteError, ConnectionError):
    """Transport-level connectivity failure during Notion API communication."""


class NotionTimeoutError(NotionWriteError, TimeoutError):
    """Transport timeout while waiting for a Notion API response."""


class NotionResponseError(NotionWriteError):
    """Non-success HTTP status returned by the Notion API.

    Attributes:
        status_code: HTTP status code of the failed response.
    """

    def __init__(self, message: str, status_code: int, error_code: str | None = None):
        super().__init__(message=message, error_code=error_code)
        self.status_code = status_code
