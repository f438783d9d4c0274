"""
Shared pytest fixtures for payark-sdk tests.

This module provides common fixtures used across all test files,
including sample API payloads, a respx router for mocking httpx and
factories for transports with instant (recorded) back-off sleeps.
"""

from unittest.mock import AsyncMock

import pytest
import respx
import structlog

from payark_sdk.http import HttpClient
from payark_sdk.types import PayArkConfig

TEST_HOST = "mock.payark.test"
TEST_BASE_URL = f"https://{TEST_HOST}"


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def respx_mock():
    """Create respx mock for httpx requests."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def make_http():
    """
    Factory for HttpClient instances pointed at the mock host.

    Back-off sleeps are replaced with an AsyncMock so retry tests run
    instantly; the requested delays stay inspectable via ``_sleep``.
    """
    def _make(**overrides) -> HttpClient:
        config = PayArkConfig(
            api_key=overrides.pop("api_key", "sk_test_key_12345"),
            base_url=overrides.pop("base_url", TEST_BASE_URL),
            timeout=overrides.pop("timeout", 5000),
            max_retries=overrides.pop("max_retries", 0),
            sandbox=overrides.pop("sandbox", False),
        )
        http = HttpClient(config)
        http._sleep = AsyncMock()
        return http

    return _make


@pytest.fixture
def sample_checkout_session():
    """Checkout session as returned by POST /v1/checkout (eSewa)."""
    return {
        "id": "pay_abc123",
        "checkout_url": "https://checkout.payark.com/pay_abc123",
        "payment_method": {
            "type": "esewa",
            "url": "https://rc-epay.esewa.com.np/api/epay/main/v2/form",
            "method": "POST",
            "fields": {
                "amount": "500",
                "transaction_uuid": "pay_abc123",
                "product_code": "EPAYTEST",
            },
        },
    }


@pytest.fixture
def sample_payment():
    """A successful payment record."""
    return {
        "id": "pay_abc123",
        "project_id": "proj_001",
        "amount": 500,
        "currency": "NPR",
        "status": "success",
        "provider_ref": "esewa_ref_789",
        "metadata_json": {"order_id": "order_42"},
        "gateway_response": {"status": "COMPLETE"},
        "created_at": "2025-01-15T10:30:00Z",
        "updated_at": "2025-01-15T10:31:12Z",
    }


@pytest.fixture
def sample_payment_page(sample_payment):
    """First page of GET /v1/payments."""
    second = dict(sample_payment, id="pay_def456", status="pending", provider_ref=None)
    return {
        "data": [sample_payment, second],
        "meta": {"total": 2, "limit": 10, "offset": 0},
    }


@pytest.fixture
def webhook_secret():
    """Webhook signing secret."""
    return "whsec_test_secret"
