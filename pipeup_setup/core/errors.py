"""
Bootstrap failures. Every subclass ends the run with exit code 1.
"""
from __future__ import annotations


class BootstrapError(Exception):
    """Base class for failures that abort the bootstrap."""

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step


class MissingTokenError(BootstrapError):
    """Expected token field absent from a backend response."""

    def __init__(self, step: str, field: str, raw_response: str) -> None:
        super().__init__(step, f"{step}: response has no {field!r}")
        self.field = field
        self.raw_response = raw_response


class BackendUnavailableError(BootstrapError):
    """Transport-level failure talking to the backend."""

    def __init__(self, step: str, url: str, reason: str) -> None:
        super().__init__(step, f"{step}: request to {url} failed: {reason}")
        self.url = url
        self.reason = reason
