"""
Location: python/payark_sdk/resources/checkout.py

Summary:
    Checkout Sessions API. Creates hosted checkout sessions that the
    customer is redirected to for payment with the chosen provider.

Example:
    session = await payark.checkout.create(
        amount=500,
        provider="esewa",
        return_url="https://example.com/thank-you",
    )
    redirect(session.checkout_url)
"""

from typing import Any, Optional, TYPE_CHECKING

from ..types import CheckoutSession, Provider

if TYPE_CHECKING:
    from ..http import HttpClient


class CheckoutResource:
    """Operations on checkout sessions."""

    def __init__(self, http: "HttpClient"):
        self._http = http

    async def create(
        self,
        *,
        amount: float,
        provider: Provider,
        return_url: str,
        currency: str = "NPR",
        cancel_url: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> CheckoutSession:
        """
        Create a new checkout session.

        The request carries an Idempotency-Key, so a retried create never
        produces a duplicate payment upstream.

        Args:
            amount: Amount in the base currency unit (e.g. 1000 = NPR 1000)
            provider: Payment provider ("esewa" or "khalti")
            return_url: Where the customer lands after paying
            currency: ISO 4217 currency code (default NPR)
            cancel_url: Where the customer lands if they cancel
            metadata: Arbitrary key/value data attached to the payment

        Returns:
            The created CheckoutSession with its checkout_url

        Raises:
            PayArkError: If the request fails validation, auth or the network
        """
        body = {
            "amount": amount,
            "currency": currency,
            "provider": provider,
            "returnUrl": return_url,
            "cancelUrl": cancel_url,
            "metadata": metadata,
        }
        data = await self._http.request(
            "POST",
            "/v1/checkout",
            body={key: value for key, value in body.items() if value is not None},
        )
        return CheckoutSession.model_validate(data)
