from __future__ import annotations
from typing import Optional


class MtsError(RuntimeError):
    """Base class for every error raised by the MTS client."""


class TransportError(MtsError):
    """Network failure, timeout or a non-200 HTTP status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(MtsError):
    """Response body is not JSON of the expected shape."""


class APIError(MtsError):
    """The gateway answered but its own result code signals failure."""

    def __init__(self, message: str, *, description: str = ""):
        super().__init__(message)
        self.description = description


class NotFoundError(MtsError):
    def __init__(self, message_id: int):
        super().__init__(f"no status found for message ID {message_id}")
        self.message_id = message_id


__all__ = ['MtsError', 'TransportError', 'DecodeError', 'APIError', 'NotFoundError']
