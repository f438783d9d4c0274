"""
Location: python/payark_sdk/http.py

Summary:
    HTTP transport layer. Executes one logical API request as one or more
    physical attempts, handling bearer authentication, idempotency keys,
    per-attempt timeouts, retries with exponential back-off and jitter
    (or the server's Retry-After delay on 429) and error classification.

Usage:
    Internal to the SDK. Every resource class in resources/ calls
    HttpClient.request and only declares *what* to call, never *how*.

Example:
    from payark_sdk.http import HttpClient
    from payark_sdk.types import PayArkConfig

    http = HttpClient(PayArkConfig(api_key="sk_test_..."))
    payments = await http.request("GET", "/v1/payments", query={"limit": 10})
"""

import asyncio
import json
import uuid
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Literal, Mapping, Optional, Union

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)
from tenacity.wait import wait_base

from .errors import (
    PayArkAuthenticationError,
    PayArkConnectionError,
    PayArkError,
    PayArkRateLimitError,
)
from .types import DEFAULT_BASE_URL, PayArkConfig

logger = structlog.get_logger(__name__)

SDK_VERSION = "0.1.0"
USER_AGENT = f"payark-sdk-python/{SDK_VERSION}"

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
QueryValue = Union[str, int, float, bool, None]

# Header names sent alongside the standard auth/content headers
SANDBOX_HEADER = "x-sandbox-mode"
IDEMPOTENCY_HEADER = "Idempotency-Key"

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH"})

# Back-off: 0.5s, 1s, 2s, ... plus up to 0.2s of jitter
BASE_RETRY_DELAY = 0.5
MAX_RETRY_JITTER = 0.2

# Longer server-directed waits are surfaced to the caller instead of slept
MAX_RETRY_AFTER = 60.0


def parse_retry_after(value: Optional[str], now: Optional[datetime] = None) -> Optional[float]:
    """
    Parse a Retry-After header value into a delay in seconds.

    The header is either a whole number of seconds or an HTTP date. Dates
    in the past yield a delay of zero.

    Args:
        value: Raw header value (None when the header is absent)
        now: Reference time for HTTP dates, defaults to the current UTC time

    Returns:
        Delay in seconds, or None if the header is absent or unparseable
    """
    if not value:
        return None

    value = value.strip()
    if value.isascii() and value.isdigit():
        return float(value)

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at is None:
        return None

    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max(0.0, (retry_at - now).total_seconds())


def _is_retryable(error: BaseException) -> bool:
    """
    Network faults (status 0) and 429/5xx gateway statuses are retried.

    A 429 whose Retry-After exceeds MAX_RETRY_AFTER is raised at once with
    the delay on ``retry_after``, so the caller decides when to come back.
    """
    if not isinstance(error, PayArkError):
        return False
    if isinstance(error, PayArkRateLimitError) and error.retry_after is not None:
        return error.retry_after <= MAX_RETRY_AFTER
    return error.status_code == 0 or error.status_code in RETRYABLE_STATUS_CODES


class wait_retry_after(wait_base):
    """
    Wait strategy that honours a server-directed Retry-After delay.

    When the failed attempt raised a PayArkRateLimitError carrying a
    parsed Retry-After value, that delay is used as-is; otherwise the
    fallback strategy decides.
    """

    def __init__(self, fallback: wait_base):
        self.fallback = fallback

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, PayArkRateLimitError) and error.retry_after is not None:
            return error.retry_after
        return self.fallback(retry_state)


class HttpClient:
    """
    Internal HTTP client shared by every resource.

    Configuration is read-only after construction, so a single instance
    can serve any number of concurrent logical requests. Each request
    keeps its own idempotency key and attempt counter.

    Attributes:
        base_url: API base URL without trailing slashes
        timeout: Default per-attempt timeout in milliseconds
        max_retries: Retries after the first attempt
        sandbox: Whether requests are flagged as sandbox mode
    """

    def __init__(self, config: PayArkConfig, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the transport.

        Args:
            config: Connection configuration
            http_client: Optional pre-built httpx.AsyncClient. The caller
                keeps ownership of an injected client and must close it.

        Raises:
            PayArkAuthenticationError: If the API key is empty or whitespace
        """
        api_key = (config.api_key or "").strip()
        if not api_key:
            raise PayArkAuthenticationError(
                "An API key is required. Pass it as `api_key` when creating the PayArk client.",
                status_code=0,
            )

        self._api_key = api_key
        self.base_url = (config.base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = config.timeout
        self.max_retries = config.max_retries
        self.sandbox = config.sandbox

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.timeout / 1000)

    async def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        query: Optional[Mapping[str, QueryValue]] = None,
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        """
        Execute an HTTP request against the PayArk API.

        Args:
            method: HTTP method
            path: Path relative to the base URL (e.g. "/v1/payments")
            query: Query parameters; None values are omitted
            body: JSON-serializable body, ignored for GET
            headers: Extra headers, merged last so they override defaults
            timeout: Per-attempt timeout override in milliseconds

        Returns:
            Parsed JSON response body ({} for 204 No Content)

        Raises:
            PayArkError: On any non-2xx response or network failure, after
                retries are exhausted for retryable conditions
        """
        method = method.upper()
        url = f"{self.base_url}{path}"
        params = self._build_query(query)

        # One key per logical request, reused verbatim on every retry
        idempotency_key = uuid.uuid4().hex if method in MUTATING_METHODS else None
        req_headers = self._build_headers(headers, idempotency_key)

        content = None
        if body is not None and method != "GET":
            content = json.dumps(body)

        request_timeout = timeout if timeout is not None else self.timeout

        def log_retry(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception()
            logger.warning(
                "payark_request_retry",
                method=method,
                path=path,
                attempt=retry_state.attempt_number,
                delay=round(retry_state.next_action.sleep, 3),
                code=getattr(error, "code", None),
                status_code=getattr(error, "status_code", None),
            )

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_retry_after(
                wait_exponential(multiplier=BASE_RETRY_DELAY, exp_base=2)
                + wait_random(0, MAX_RETRY_JITTER)
            ),
            retry=retry_if_exception(_is_retryable),
            before_sleep=log_retry,
            sleep=self._sleep,
            reraise=True,
        )

        logger.debug("payark_request", method=method, path=path, sandbox=self.sandbox)
        return await retrying(
            self._send,
            method,
            url,
            params=params,
            headers=req_headers,
            content=content,
            timeout=request_timeout,
        )

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str],
        headers: httpx.Headers,
        content: Optional[str],
        timeout: int,
    ) -> Any:
        """
        Perform a single physical attempt.

        The attempt is bounded by ``timeout`` milliseconds overall; expiry
        cancels the in-flight request and is reported as a connection error.
        """
        seconds = timeout / 1000
        try:
            response = await asyncio.wait_for(
                self._http.request(
                    method,
                    url,
                    params=params,
                    headers=headers,
                    content=content,
                    timeout=seconds,
                ),
                timeout=seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise PayArkConnectionError(f"Request timed out after {timeout}ms") from exc
        except httpx.RequestError as exc:
            raise PayArkConnectionError(f"Network error: {exc}") from exc

        if response.is_success:
            if response.status_code == 204:
                return {}
            try:
                return response.json()
            except ValueError as exc:
                raise PayArkConnectionError(
                    f"Network error: invalid JSON in response body ({exc})"
                ) from exc

        raise self._error_from_response(response)

    def _error_from_response(self, response: httpx.Response) -> PayArkError:
        """Build a classified error from a non-2xx response."""
        try:
            error_body = response.json()
        except ValueError:
            # Not JSON (HTML error page, plain text...) - fall back to status text
            error_body = None

        embedded = error_body.get("error") if isinstance(error_body, dict) else None
        if isinstance(embedded, str) and embedded:
            message = embedded
        else:
            message = f"PayArk API error: {response.status_code} {response.reason_phrase}".rstrip()

        error = PayArkError.generate(response.status_code, error_body, message)
        if isinstance(error, PayArkRateLimitError):
            error.retry_after = parse_retry_after(response.headers.get("Retry-After"))
        return error

    def _build_headers(
        self,
        extra: Optional[Mapping[str, str]],
        idempotency_key: Optional[str],
    ) -> httpx.Headers:
        """Default headers, then caller headers (case-insensitive, caller wins)."""
        headers = httpx.Headers({
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        })
        if self.sandbox:
            headers[SANDBOX_HEADER] = "true"
        if idempotency_key:
            headers[IDEMPOTENCY_HEADER] = idempotency_key
        if extra:
            headers.update(extra)
        return headers

    @staticmethod
    def _build_query(query: Optional[Mapping[str, QueryValue]]) -> dict[str, str]:
        params: dict[str, str] = {}
        for key, value in (query or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = str(value)
        return params

    async def _sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
