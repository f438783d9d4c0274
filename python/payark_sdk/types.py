"""
Location: python/payark_sdk/types.py

Summary:
    Pydantic models for the payark-sdk. Defines the client configuration
    and the response shapes of the PayArk REST API v1 (checkout sessions,
    payments, pagination, projects) plus the webhook event payload.

Usage:
    PayArkConfig is built by client.py and consumed by http.py. The
    response models are returned by the resource classes in resources/.
    Response models accept unknown fields so new API attributes never
    break older SDK versions.

Example:
    from payark_sdk.types import PayArkConfig

    config = PayArkConfig(api_key="sk_test_...", sandbox=True)
"""

from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.payark.com"

Provider = Literal["esewa", "khalti"]
PaymentStatus = Literal["pending", "success", "failed"]

T = TypeVar("T")


class PayArkConfig(BaseModel):
    """
    Connection configuration, immutable once created.

    Attributes:
        api_key: Secret API key (``sk_...``) or Personal Access Token
        base_url: API base URL, defaults to the production host
        timeout: Request timeout in milliseconds
        max_retries: Retries on 429/5xx/network errors (0 disables retrying)
        sandbox: Send every request in sandbox mode
    """
    api_key: str = Field(alias="apiKey")
    base_url: str = Field(DEFAULT_BASE_URL, alias="baseUrl")
    timeout: int = Field(30_000, gt=0)
    max_retries: int = Field(2, ge=0, alias="maxRetries")
    sandbox: bool = False

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PaymentMethod(BaseModel):
    """
    Provider-specific instructions for completing a checkout.

    Attributes:
        type: Payment provider handling the checkout
        url: Provider endpoint the customer is sent to
        method: HTTP method for the provider redirect (GET or POST)
        fields: Form fields to submit when method is POST
    """
    type: Provider
    url: Optional[str] = None
    method: Optional[Literal["GET", "POST"]] = None
    fields: Optional[dict[str, str]] = None

    model_config = ConfigDict(extra="allow")


class CheckoutSession(BaseModel):
    """A created checkout session with its hosted checkout URL."""
    id: str
    checkout_url: str
    payment_method: PaymentMethod

    model_config = ConfigDict(extra="allow")


class Payment(BaseModel):
    """A payment record as returned by the API."""
    id: str
    project_id: str
    amount: float
    currency: str
    status: PaymentStatus
    provider_ref: Optional[str] = None
    metadata_json: Optional[dict[str, Any]] = None
    gateway_response: Optional[dict[str, Any]] = None
    created_at: str
    updated_at: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class PaginationMeta(BaseModel):
    """Pagination metadata returned alongside list queries."""
    total: Optional[int] = None
    limit: int
    offset: int


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response wrapper for list endpoints."""
    data: list[T]
    meta: PaginationMeta


class Project(BaseModel):
    """A project belonging to the authenticated account."""
    id: str
    name: str
    created_at: Optional[str] = None

    model_config = ConfigDict(extra="allow")



WebhookEventType = Literal["payment.success", "payment.failed"]


class WebhookEventData(BaseModel):
    """The payment that triggered a webhook event."""
    id: str
    amount: float
    currency: str
    status: str
    metadata: Optional[dict[str, Any]] = None

    model_config = ConfigDict(extra="allow")


class WebhookEvent(BaseModel):
    """
    A webhook event delivered to your server.

    Webhooks.construct_event returns the decoded JSON; validate it with
    ``WebhookEvent.model_validate(event)`` for typed access.

    Attributes:
        type: Event type, e.g. "payment.success"
        id: Unique ID of this event occurrence
        data: The payment the event is about
        is_test: Whether the event was produced in sandbox mode
        created: Unix timestamp of event creation
    """
    type: WebhookEventType
    id: Optional[str] = None
    data: WebhookEventData
    is_test: bool
    created: Optional[int] = None

    model_config = ConfigDict(extra="allow")
