"""
Location: python/payark_sdk/client.py

Summary:
    Main PayArk client class for the payark-sdk. Owns the HTTP transport
    and exposes the API resources (checkout, payments, projects) plus the
    stateless webhook verifier.

Usage:
    The primary entry point for using the SDK. Create one PayArk client
    per API key and reuse it; it is safe to share between concurrent tasks.

Example:
    from payark_sdk import PayArk

    async with PayArk("sk_live_...") as payark:
        session = await payark.checkout.create(
            amount=500,
            provider="esewa",
            return_url="https://example.com/thank-you",
        )
        print(session.checkout_url)

        page = await payark.payments.list(limit=25)
        print(f"Found {page.meta.total} payments")

    # Webhooks need no client instance
    event = PayArk.webhooks.construct_event(raw_body, signature, secret)
"""

from typing import Optional

import httpx
import structlog

from .http import HttpClient
from .resources import CheckoutResource, PaymentsResource, ProjectsResource
from .types import DEFAULT_BASE_URL, PayArkConfig
from .webhooks import Webhooks

logger = structlog.get_logger(__name__)


class PayArk:
    """
    The PayArk SDK client.

    Resource accessors are built lazily and at most once per client.

    Attributes:
        config: The immutable connection configuration
        webhooks: Stateless webhook verifier, available on the class itself
    """

    webhooks = Webhooks()

    def __init__(
        self,
        api_key: str,
        *,
        base_url: Optional[str] = None,
        timeout: int = 30_000,
        max_retries: int = 2,
        sandbox: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Create a new PayArk client.

        Args:
            api_key: Secret API key (sk_...) or Personal Access Token
            base_url: Override the API host (local development, self-hosting)
            timeout: Per-attempt request timeout in milliseconds
            max_retries: Retries on 429/5xx/network errors (0 disables)
            sandbox: Send every request in sandbox mode (no real money moves)
            http_client: Optional httpx.AsyncClient to send requests with

        Raises:
            PayArkAuthenticationError: If api_key is empty or whitespace
            pydantic.ValidationError: If timeout or max_retries is out of range
        """
        self.config = PayArkConfig(
            api_key=api_key,
            base_url=base_url or DEFAULT_BASE_URL,
            timeout=timeout,
            max_retries=max_retries,
            sandbox=sandbox,
        )
        self._http = HttpClient(self.config, http_client=http_client)

        self._checkout: Optional[CheckoutResource] = None
        self._payments: Optional[PaymentsResource] = None
        self._projects: Optional[ProjectsResource] = None

        logger.info(
            "payark_client_initialized",
            base_url=self._http.base_url,
            sandbox=self.config.sandbox,
        )

    async def close(self) -> None:
        """Release the underlying HTTP connections."""
        await self._http.close()

    async def __aenter__(self) -> "PayArk":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    @property
    def checkout(self) -> CheckoutResource:
        """Checkout sessions resource."""
        if self._checkout is None:
            self._checkout = CheckoutResource(self._http)
        return self._checkout

    @property
    def payments(self) -> PaymentsResource:
        """Payments resource."""
        if self._payments is None:
            self._payments = PaymentsResource(self._http)
        return self._payments

    @property
    def projects(self) -> ProjectsResource:
        """Projects resource (requires a Personal Access Token)."""
        if self._projects is None:
            self._projects = ProjectsResource(self._http)
        return self._projects
