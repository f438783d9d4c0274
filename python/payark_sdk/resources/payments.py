"""
Location: python/payark_sdk/resources/payments.py

Summary:
    Payments API. Lists payment records (newest first, paginated) and
    retrieves a single payment by id.
"""

from typing import Optional, TYPE_CHECKING
from urllib.parse import quote

from ..types import PaginatedResponse, Payment

if TYPE_CHECKING:
    from ..http import HttpClient


class PaymentsResource:
    """Operations on payment records."""

    def __init__(self, http: "HttpClient"):
        self._http = http

    async def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        project_id: Optional[str] = None,
    ) -> PaginatedResponse[Payment]:
        """
        List payments for the authenticated project.

        Args:
            limit: Maximum number of records (1-100, server default 10)
            offset: Number of records to skip
            project_id: Restrict to one project (Personal Access Tokens only)

        Returns:
            PaginatedResponse with the payments and pagination metadata
        """
        data = await self._http.request(
            "GET",
            "/v1/payments",
            query={"limit": limit, "offset": offset, "projectId": project_id},
        )
        return PaginatedResponse[Payment].model_validate(data)

    async def retrieve(self, payment_id: str) -> Payment:
        """
        Retrieve a single payment.

        Args:
            payment_id: Payment identifier (e.g. "pay_abc123")

        Returns:
            The Payment

        Raises:
            PayArkNotFoundError: If the payment does not exist
        """
        data = await self._http.request("GET", f"/v1/payments/{quote(payment_id, safe='')}")
        return Payment.model_validate(data)
