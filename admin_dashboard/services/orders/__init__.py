"""Orders API integration.

This package provides:
- Async client for the remote get-orders endpoint
- FetchError with transport/malformed-response kinds
"""

from admin_dashboard.services.orders.client import (
    FetchError,
    FetchErrorKind,
    OrdersClient,
)

__all__ = [
    "FetchError",
    "FetchErrorKind",
    "OrdersClient",
]
