"""managed-records exception hierarchy."""

from typing import Any, Optional


class RecordsError(Exception):
    """Base exception for all managed-records errors."""

    def __init__(self, message: str = "", code: str = "RECORDS_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TransportError(RecordsError):
    """Raised when the records endpoint could not deliver a page.

    Carries the underlying exception as ``cause`` and, when the server did
    answer, its status code and parsed body as ``payload``.
    """

    def __init__(
        self,
        message: str = "Transport failure",
        code: str = "TRANSPORT_ERROR",
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message, code=code)
        self.cause = cause
        self.status_code = status_code
        self.payload = payload


class UpstreamStatusError(TransportError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, payload: Any = None, message: str = ""):
        super().__init__(
            message or f"Upstream returned HTTP {status_code}",
            code="UPSTREAM_STATUS",
            status_code=status_code,
            payload=payload,
        )


class RequestTimeoutError(TransportError):
    """Raised when the request to the endpoint times out."""

    def __init__(self, message: str = "Request timed out", cause: Optional[BaseException] = None):
        super().__init__(message, code="TIMEOUT", cause=cause)


class ConnectionFailedError(TransportError):
    """Raised on network-level failures (DNS, refused connection, protocol errors)."""

    def __init__(self, message: str = "Connection failed", cause: Optional[BaseException] = None):
        super().__init__(message, code="CONNECTION_ERROR", cause=cause)


class InvalidResponseError(TransportError):
    """Raised when the response body is not valid JSON."""

    def __init__(
        self,
        message: str = "Invalid JSON response",
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, code="INVALID_RESPONSE", cause=cause, status_code=status_code)


class MalformedPageError(RecordsError):
    """Raised when a fetched page cannot be transformed into a summary."""

    def __init__(self, message: str = "Malformed page data"):
        super().__init__(message, code="MALFORMED_PAGE")
