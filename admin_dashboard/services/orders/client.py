"""Async HTTP client for the remote orders API."""

import enum
from typing import Optional
import logging

import httpx
from pydantic import ValidationError

from admin_dashboard.config import get_settings
from admin_dashboard.schemas.order import OrderRecord, OrdersResponse

logger = logging.getLogger(__name__)


class FetchErrorKind(str, enum.Enum):
    """Why an order fetch failed."""

    TRANSPORT_FAILURE = "TransportFailure"
    MALFORMED_RESPONSE = "MalformedResponse"


class FetchError(Exception):
    """Custom exception for order fetch failures."""

    def __init__(
        self,
        kind: FetchErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class OrdersClient:
    """Client for the get-orders endpoint.

    Features:
    - Single read operation returning the full current order set
    - No internal retries; callers decide when to fetch again
    - Transport and payload problems surface as FetchError
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            url: Orders endpoint (default from settings)
            timeout: Request timeout in seconds (default from settings)
            http_client: Shared httpx client; a short-lived one is opened
                per request when omitted
        """
        settings = get_settings()
        self.url = url or settings.ORDERS_API_URL
        self.timeout = timeout or settings.ORDERS_API_TIMEOUT_SECONDS
        self._http_client = http_client

    async def _get(self) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.get(self.url, timeout=self.timeout)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(self.url)

    async def fetch(self) -> list[OrderRecord]:
        """Fetch the current snapshot of orders.

        Returns:
            Orders in the order the API returned them

        Raises:
            FetchError: TRANSPORT_FAILURE on network errors, timeouts and
                non-2xx responses; MALFORMED_RESPONSE when the body is not
                JSON or lacks a well-formed ``orders`` list
        """
        try:
            response = await self._get()
        except httpx.TimeoutException as e:
            logger.error(f"Orders API timed out after {self.timeout}s: {e}")
            raise FetchError(
                FetchErrorKind.TRANSPORT_FAILURE,
                f"Request to orders API timed out after {self.timeout}s",
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Orders API request failed: {e}")
            raise FetchError(
                FetchErrorKind.TRANSPORT_FAILURE,
                f"Failed to fetch orders: {e}",
            ) from e

        if not response.is_success:
            logger.error(
                f"Orders API error: {response.status_code} - {response.text}"
            )
            raise FetchError(
                FetchErrorKind.TRANSPORT_FAILURE,
                f"Failed to fetch orders: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Orders API returned non-JSON body: {e}")
            raise FetchError(
                FetchErrorKind.MALFORMED_RESPONSE,
                "Orders API returned a body that is not valid JSON",
                status_code=response.status_code,
            ) from e

        try:
            parsed = OrdersResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Orders API payload failed validation: {e}")
            raise FetchError(
                FetchErrorKind.MALFORMED_RESPONSE,
                f"Orders API response is malformed: {e.error_count()} invalid field(s)",
                status_code=response.status_code,
            ) from e

        logger.info(f"Fetched {len(parsed.orders)} orders")
        return parsed.orders
