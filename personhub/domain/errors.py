# personhub/domain/errors.py
from __future__ import annotations

from typing import Optional


class PersonHubError(Exception):
    """base exception for personhub-specific errors"""


class StorageConnectionError(PersonHubError, ConnectionError):
    """
    Storage could not be reached after every connect attempt.
    Fatal at startup; the process should abort instead of retrying further.
    """

    def __init__(self, message: str, *, attempts: int = 0, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.attempts = attempts
        self.cause = cause


class SchemaError(PersonHubError):
    """storage was reached but the people schema could not be prepared"""


class NotFoundError(PersonHubError, LookupError):
    """a query template matched no record"""


class ValidationError(PersonHubError, ValueError):
    """malformed input"""


class StorageError(PersonHubError):
    """any other backend failure during an operation (never retried)"""
