"""
Location: python/payark_sdk/__init__.py

Summary:
    Main package initialization for payark-sdk. Exports the client,
    error classes, response models and webhook utilities.

Usage:
    from payark_sdk import PayArk, PayArkError

    # Or import specific modules
    from payark_sdk.webhooks import Webhooks
    from payark_sdk.types import Payment, CheckoutSession

Version: 0.1.0 (PayArk REST API v1)
"""

from .client import PayArk
from .errors import (
    PayArkError,
    PayArkErrorCode,
    PayArkAuthenticationError,
    PayArkPermissionError,
    PayArkInvalidRequestError,
    PayArkNotFoundError,
    PayArkRateLimitError,
    PayArkAPIError,
    PayArkConnectionError,
    PayArkSignatureVerificationError,
    error_code_from_status,
)
from .http import SDK_VERSION
from .types import (
    PayArkConfig,
    CheckoutSession,
    PaymentMethod,
    Payment,
    PaymentStatus,
    PaginatedResponse,
    PaginationMeta,
    Project,
    Provider,
    WebhookEvent,
    WebhookEventData,
    WebhookEventType,
)
from .webhooks import Webhooks, SignatureHeader, SIGNATURE_HEADER

__version__ = SDK_VERSION

__all__ = [
    # Main client
    "PayArk",
    # Exceptions
    "PayArkError",
    "PayArkErrorCode",
    "PayArkAuthenticationError",
    "PayArkPermissionError",
    "PayArkInvalidRequestError",
    "PayArkNotFoundError",
    "PayArkRateLimitError",
    "PayArkAPIError",
    "PayArkConnectionError",
    "PayArkSignatureVerificationError",
    "error_code_from_status",
    # Types
    "PayArkConfig",
    "CheckoutSession",
    "PaymentMethod",
    "Payment",
    "PaymentStatus",
    "PaginatedResponse",
    "PaginationMeta",
    "Project",
    "Provider",
    "WebhookEvent",
    "WebhookEventData",
    "WebhookEventType",
    # Webhooks
    "Webhooks",
    "SignatureHeader",
    "SIGNATURE_HEADER",
    # Version
    "SDK_VERSION",
]
