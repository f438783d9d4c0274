"""
Location: python/payark_sdk/webhooks.py

Summary:
    Webhook signature verification. PayArk signs every webhook with an
    HMAC-SHA256 over "<timestamp>.<raw body>" and sends the result in the
    X-PayArk-Signature header as "t=<unix seconds>,v1=<hex digest>".

Usage:
    Stateless, needs no API key or client instance. Exposed as
    PayArk.webhooks and usable directly:

        from payark_sdk import PayArk

        event = PayArk.webhooks.construct_event(
            request_body,                           # raw bytes, NOT re-serialized JSON
            headers["X-PayArk-Signature"],
            webhook_secret,
        )

    The body must be the exact bytes received; parsing and re-dumping the
    JSON before verification changes the signed content.
"""

import hashlib
import hmac
import json
import time
from typing import Any, NamedTuple, Optional, Union

import structlog

from .errors import PayArkSignatureVerificationError

logger = structlog.get_logger(__name__)

SIGNATURE_HEADER = "X-PayArk-Signature"
DEFAULT_TOLERANCE_SECONDS = 300

Payload = Union[str, bytes]


class SignatureHeader(NamedTuple):
    """Parsed components of a signature header."""
    timestamp: int
    signature: str


class Webhooks:
    """Verify PayArk webhook signatures and parse verified events."""

    def parse_header(self, header: Optional[str]) -> Optional[SignatureHeader]:
        """
        Split a signature header into its timestamp and v1 signature.

        Args:
            header: Raw X-PayArk-Signature header value

        Returns:
            SignatureHeader, or None if the header is malformed or misses
            either the ``t`` or ``v1`` component
        """
        if not header:
            return None

        timestamp: Optional[int] = None
        signature: Optional[str] = None

        for part in header.split(","):
            key, sep, value = part.strip().partition("=")
            if not sep:
                continue
            if key == "t":
                try:
                    timestamp = int(value)
                except ValueError:
                    return None
            elif key == "v1":
                signature = value

        if timestamp is None or not signature:
            return None
        return SignatureHeader(timestamp, signature)

    def compute_signature(self, payload: Payload, secret: str, timestamp: int) -> str:
        """
        Compute the lowercase hex HMAC-SHA256 of "<timestamp>.<payload>".

        Args:
            payload: Raw request body (str is encoded as UTF-8)
            secret: Webhook signing secret
            timestamp: Unix timestamp in seconds

        Returns:
            Hex digest
        """
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        signed_content = f"{timestamp}.".encode("utf-8") + payload
        return hmac.new(secret.encode("utf-8"), signed_content, hashlib.sha256).hexdigest()

    def construct_event(
        self,
        payload: Payload,
        header: Optional[str],
        secret: str,
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    ) -> Any:
        """
        Verify a webhook signature and return the parsed event.

        Args:
            payload: Raw request body exactly as received
            header: X-PayArk-Signature header value
            secret: Webhook signing secret
            tolerance: Maximum age in seconds, past or future (0 disables)

        Returns:
            The decoded JSON event. Pass it to
            ``WebhookEvent.model_validate(event)`` for a typed model.

        Raises:
            PayArkSignatureVerificationError: If the header is malformed, the
                timestamp is outside the tolerance or the signature differs
            json.JSONDecodeError: If a correctly signed payload is not JSON
        """
        self._check(payload, header, secret, tolerance)
        return json.loads(payload)

    def verify(
        self,
        payload: Payload,
        header: Optional[str],
        secret: str,
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    ) -> bool:
        """
        Check a webhook signature without parsing the payload.

        Same checks as construct_event, reported as a boolean.
        """
        try:
            self._check(payload, header, secret, tolerance)
        except PayArkSignatureVerificationError:
            return False
        return True

    def generate_test_header(
        self,
        payload: Payload,
        secret: str,
        timestamp: Optional[int] = None,
    ) -> str:
        """
        Build a valid signature header, for testing webhook handlers.

        Args:
            payload: Body that will be sent to the handler
            secret: Webhook signing secret
            timestamp: Unix timestamp, defaults to now

        Returns:
            Header value in "t=<timestamp>,v1=<signature>" form
        """
        if timestamp is None:
            timestamp = int(time.time())
        return f"t={timestamp},v1={self.compute_signature(payload, secret, timestamp)}"

    def _check(
        self,
        payload: Payload,
        header: Optional[str],
        secret: str,
        tolerance: int,
    ) -> None:
        parsed = self.parse_header(header)
        if parsed is None:
            raise PayArkSignatureVerificationError(
                "Unable to extract timestamp and signature from header"
            )

        # Replay protection
        if tolerance and abs(int(time.time()) - parsed.timestamp) > tolerance:
            logger.warning(
                "payark_webhook_verification_failed",
                reason="timestamp_outside_tolerance",
                timestamp=parsed.timestamp,
            )
            raise PayArkSignatureVerificationError("Timestamp outside the tolerance zone")

        expected = self.compute_signature(payload, secret, parsed.timestamp)
        if not _constant_time_equal(expected, parsed.signature):
            logger.warning(
                "payark_webhook_verification_failed",
                reason="signature_mismatch",
                timestamp=parsed.timestamp,
            )
            raise PayArkSignatureVerificationError("Signature did not match")


def _constant_time_equal(expected: str, received: str) -> bool:
    """
    Compare two signatures in time independent of where they differ.

    Only the length is allowed to short-circuit.
    """
    a = expected.encode("utf-8")
    b = received.encode("utf-8")
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)
