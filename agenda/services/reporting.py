"""Side channel through which swallowed request failures are reported."""

from __future__ import annotations

import logging
from typing import List, Protocol, Tuple

import httpx
from pydantic import ValidationError

from agenda.services.exceptions import DownstreamServiceError, MalformedEnvelopeError

logger = logging.getLogger("agenda.errors")


class ErrorReporter(Protocol):
    def report(self, message: str, error: BaseException) -> None:
        ...


def _server_message(error: DownstreamServiceError) -> str | None:
    cause = error.cause
    if not isinstance(cause, httpx.HTTPStatusError):
        return None
    try:
        body = cause.response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def describe_error(error: BaseException) -> str:
    """Return a one-line, human readable description of a request failure."""
    if isinstance(error, DownstreamServiceError):
        if error.status_code is None:
            return f"network error ({error.cause or error})"
        server_message = _server_message(error)
        if server_message:
            return f"HTTP {error.status_code}: {server_message}"
        return f"HTTP {error.status_code}"
    if isinstance(error, MalformedEnvelopeError) and isinstance(error.cause, ValidationError):
        return f"malformed response envelope ({error.cause.error_count()} validation errors)"
    if isinstance(error, ValidationError):
        return f"invalid data ({error.error_count()} validation errors)"
    return f"{type(error).__name__}: {error}"


class LoggingErrorReporter:
    """Default reporter: one ERROR record per failure."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def report(self, message: str, error: BaseException) -> None:
        self._logger.error("%s: %s", message, describe_error(error), exc_info=error)


class RecordingErrorReporter:
    """Keeps reported failures in memory; handy for callers that surface them later."""

    def __init__(self) -> None:
        self.reports: List[Tuple[str, BaseException]] = []

    def report(self, message: str, error: BaseException) -> None:
        self.reports.append((message, error))

    @property
    def messages(self) -> List[str]:
        return [message for message, _ in self.reports]
