class ServiceError(Exception):
    """Base exception for service layer failures."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class DownstreamServiceError(ServiceError):
    """Raised when the agenda API is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, *, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.status_code = status_code


class MalformedEnvelopeError(ServiceError):
    """Raised when a response body does not match the ``{code, status, data, message}`` envelope."""
