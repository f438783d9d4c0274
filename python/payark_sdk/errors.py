"""
Location: python/payark_sdk/errors.py

Summary:
    Structured error hierarchy for the payark-sdk. Every failed API call,
    network fault or webhook verification failure surfaces as a PayArkError
    carrying a machine-readable code, the HTTP status (0 for non-HTTP
    failures) and the raw error body returned by the API.

Usage:
    Raised by http.py and webhooks.py. Callers can branch on either the
    exception class or the ``code`` attribute.

Example:
    from payark_sdk.errors import PayArkError

    try:
        await payark.checkout.create(amount=500, provider="esewa", return_url=url)
    except PayArkError as err:
        if err.code == "rate_limit_error":
            ...  # back off
        elif err.code == "authentication_error":
            ...  # re-authenticate
"""

from typing import Any, Literal, Optional

PayArkErrorCode = Literal[
    "authentication_error",
    "permission_error",
    "invalid_request_error",
    "not_found_error",
    "rate_limit_error",
    "api_error",
    "connection_error",
    "unknown_error",
    "signature_verification_error",
]


def error_code_from_status(status: int) -> PayArkErrorCode:
    """
    Classify an HTTP status code into a PayArkErrorCode.

    The first matching rule wins, so 0 (no HTTP response at all) is
    reported as a connection failure and any other unmapped status
    falls through to ``unknown_error``.

    Args:
        status: HTTP status code, or 0 for network-level failures

    Returns:
        The error code for that status
    """
    if status == 401:
        return "authentication_error"
    if status == 403:
        return "permission_error"
    if status in (400, 422):
        return "invalid_request_error"
    if status == 404:
        return "not_found_error"
    if status == 429:
        return "rate_limit_error"
    if status == 0:
        return "connection_error"
    if status >= 500:
        return "api_error"
    return "unknown_error"


class PayArkError(Exception):
    """
    Base exception for all payark-sdk errors.

    Attributes:
        message: Human readable description
        status_code: HTTP status code (0 for network-level failures)
        code: Machine-readable error classification
        raw: Decoded error body from the API, when one was returned
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        code: PayArkErrorCode = "unknown_error",
        raw: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.raw = raw

    @classmethod
    def generate(
        cls,
        status_code: int,
        body: Optional[Any] = None,
        message: Optional[str] = None,
    ) -> "PayArkError":
        """
        Build the appropriate PayArkError subclass for a status code.

        Message resolution order: the explicit ``message`` argument, then
        the ``error`` string embedded in the response body, then a
        synthesized "Request failed with status N".

        Args:
            status_code: HTTP status code (0 for network failures)
            body: Decoded response body, if any
            message: Optional message overriding the body's error string

        Returns:
            A fully populated PayArkError (or subclass) instance
        """
        if message is None and isinstance(body, dict):
            embedded = body.get("error")
            if isinstance(embedded, str) and embedded:
                message = embedded
        if message is None:
            message = f"Request failed with status {status_code}"

        code = error_code_from_status(status_code)
        error_cls = _ERROR_CLASSES.get(code, PayArkError)
        if error_cls is PayArkError:
            return PayArkError(message, status_code, code, body)
        return error_cls(message, status_code, body)

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a plain dict for structured logging."""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "raw": self.raw,
        }

    def __str__(self) -> str:
        return f"[PayArkError: {self.code}] {self.message} (HTTP {self.status_code})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.message!r}, "
            f"status_code={self.status_code}, code={self.code!r})"
        )


class PayArkAuthenticationError(PayArkError):
    """Invalid or missing API key (HTTP 401)."""

    def __init__(self, message: str, status_code: int = 401, raw: Optional[Any] = None):
        super().__init__(message, status_code, "authentication_error", raw)


class PayArkPermissionError(PayArkError):
    """Authenticated but not allowed to access the resource (HTTP 403)."""

    def __init__(self, message: str, status_code: int = 403, raw: Optional[Any] = None):
        super().__init__(message, status_code, "permission_error", raw)


class PayArkInvalidRequestError(PayArkError):
    """Request body or parameters were rejected (HTTP 400/422)."""

    def __init__(self, message: str, status_code: int = 400, raw: Optional[Any] = None):
        super().__init__(message, status_code, "invalid_request_error", raw)


class PayArkNotFoundError(PayArkError):
    """Requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str, status_code: int = 404, raw: Optional[Any] = None):
        super().__init__(message, status_code, "not_found_error", raw)


class PayArkRateLimitError(PayArkError):
    """
    Too many requests (HTTP 429).

    Attributes:
        retry_after: Server-directed delay in seconds parsed from the
            Retry-After header, or None when the header was absent
    """

    def __init__(self, message: str, status_code: int = 429, raw: Optional[Any] = None):
        super().__init__(message, status_code, "rate_limit_error", raw)
        self.retry_after: Optional[float] = None


class PayArkAPIError(PayArkError):
    """Server-side failure (HTTP 5xx)."""

    def __init__(self, message: str, status_code: int = 500, raw: Optional[Any] = None):
        super().__init__(message, status_code, "api_error", raw)


class PayArkConnectionError(PayArkError):
    """Network failure or timeout before any HTTP response arrived."""

    def __init__(self, message: str, status_code: int = 0, raw: Optional[Any] = None):
        super().__init__(message, status_code, "connection_error", raw)


class PayArkSignatureVerificationError(PayArkError):
    """Webhook signature header was malformed, stale or did not match."""

    def __init__(self, message: str):
        super().__init__(message, 0, "signature_verification_error")


_ERROR_CLASSES: dict[str, type[PayArkError]] = {
    "authentication_error": PayArkAuthenticationError,
    "permission_error": PayArkPermissionError,
    "invalid_request_error": PayArkInvalidRequestError,
    "not_found_error": PayArkNotFoundError,
    "rate_limit_error": PayArkRateLimitError,
    "api_error": PayArkAPIError,
    "connection_error": PayArkConnectionError,
}
