"""
Tests for payark_sdk.types module.

Tests the PayArkConfig model and the API response models. Verifies
alias handling, defaults, validation and tolerance of unknown fields.
"""

import pytest
from pydantic import ValidationError

from payark_sdk.types import (
    CheckoutSession,
    DEFAULT_BASE_URL,
    PaginatedResponse,
    PayArkConfig,
    Payment,
    Project,
    WebhookEvent,
    WebhookEventData,
)


class TestPayArkConfig:
    """Tests for PayArkConfig model."""

    def test_defaults(self):
        """Test default values."""
        config = PayArkConfig(api_key="sk_test")

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 30_000
        assert config.max_retries == 2
        assert config.sandbox is False

    def test_camel_case_aliases(self):
        """Test that camelCase keys are accepted."""
        config = PayArkConfig.model_validate(
            {"apiKey": "sk_test", "baseUrl": "http://localhost:3001", "maxRetries": 0}
        )

        assert config.api_key == "sk_test"
        assert config.base_url == "http://localhost:3001"
        assert config.max_retries == 0

    def test_frozen(self):
        """Test that the config cannot be mutated."""
        config = PayArkConfig(api_key="sk_test")
        with pytest.raises(ValidationError):
            config.timeout = 1

    @pytest.mark.parametrize("field, value", [("timeout", 0), ("max_retries", -1)])
    def test_rejects_out_of_range(self, field, value):
        """Test numeric bounds."""
        with pytest.raises(ValidationError):
            PayArkConfig(api_key="sk_test", **{field: value})


class TestPayment:
    """Tests for Payment model."""

    def test_from_api(self, sample_payment):
        """Test parsing a full payment record."""
        payment = Payment.model_validate(sample_payment)

        assert payment.id == "pay_abc123"
        assert payment.amount == 500
        assert payment.status == "success"
        assert payment.gateway_response == {"status": "COMPLETE"}

    def test_minimal(self):
        """Test that optional fields default to None."""
        payment = Payment.model_validate({
            "id": "pay_1",
            "project_id": "proj_1",
            "amount": 12.5,
            "currency": "NPR",
            "status": "pending",
            "created_at": "2025-01-15T10:30:00Z",
        })

        assert payment.provider_ref is None
        assert payment.metadata_json is None
        assert payment.updated_at is None

    def test_unknown_status_rejected(self, sample_payment):
        """Test that status is restricted to known values."""
        with pytest.raises(ValidationError):
            Payment.model_validate(dict(sample_payment, status="refunded"))


class TestCheckoutSession:
    """Tests for CheckoutSession model."""

    def test_from_api(self, sample_checkout_session):
        """Test parsing a checkout session with form fields."""
        session = CheckoutSession.model_validate(sample_checkout_session)

        assert session.payment_method.method == "POST"
        assert session.payment_method.fields["amount"] == "500"

    def test_redirect_only_method(self):
        """Test a provider that only needs a redirect URL."""
        session = CheckoutSession.model_validate({
            "id": "pay_k1",
            "checkout_url": "https://checkout.payark.com/pay_k1",
            "payment_method": {"type": "khalti"},
        })

        assert session.payment_method.type == "khalti"
        assert session.payment_method.fields is None


class TestPaginatedResponse:
    """Tests for the generic PaginatedResponse model."""

    def test_typed_items(self, sample_payment_page):
        """Test that items are parsed into the parameter type."""
        page = PaginatedResponse[Payment].model_validate(sample_payment_page)

        assert all(isinstance(item, Payment) for item in page.data)
        assert page.meta.limit == 10

    def test_other_item_type(self):
        """Test the wrapper is not tied to payments."""
        page = PaginatedResponse[Project].model_validate({
            "data": [{"id": "proj_1", "name": "Store"}],
            "meta": {"limit": 1, "offset": 0},
        })

        assert page.data[0].name == "Store"
        assert page.meta.total is None


class TestWebhookEvent:
    """Tests for WebhookEvent model."""

    def test_from_payload(self):
        """Test parsing a payment.success delivery."""
        event = WebhookEvent.model_validate({
            "type": "payment.success",
            "id": "evt_123",
            "data": {
                "id": "pay_abc123",
                "amount": 500,
                "currency": "NPR",
                "status": "success",
                "metadata": {"order_id": "order_42"},
                "provider_ref": "esewa_ref_789",
            },
            "is_test": True,
            "created": 1700000000,
        })

        assert isinstance(event.data, WebhookEventData)
        assert event.type == "payment.success"
        assert event.data.amount == 500
        assert event.data.metadata == {"order_id": "order_42"}
        assert event.data.model_extra["provider_ref"] == "esewa_ref_789"
        assert event.is_test is True
        assert event.created == 1700000000

    def test_optional_fields(self):
        """Test that id, created and metadata may be absent."""
        event = WebhookEvent.model_validate({
            "type": "payment.failed",
            "data": {"id": "pay_1", "amount": 10, "currency": "NPR", "status": "failed"},
            "is_test": False,
        })

        assert event.id is None
        assert event.created is None
        assert event.data.metadata is None

    def test_unknown_event_type_rejected(self):
        """Test that type is restricted to known events."""
        with pytest.raises(ValidationError):
            WebhookEvent.model_validate({
                "type": "payment.refunded",
                "data": {"id": "pay_1", "amount": 10, "currency": "NPR", "status": "failed"},
                "is_test": False,
            })
