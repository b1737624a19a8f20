"""Order schemas for the remote orders payload."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DELIVERED_STATUS = "Delivered"


class OrderRecord(BaseModel):
    """A single order as returned by the orders API.

    Only the fields used for metrics are declared; everything else in the
    payload is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, strict=True, allow_inf_nan=False)

    @property
    def is_delivered(self) -> bool:
        """Exact, case-sensitive match on the delivered status."""
        return self.status == DELIVERED_STATUS


class OrdersResponse(BaseModel):
    """Top-level payload of the get-orders endpoint."""

    model_config = ConfigDict(extra="ignore")

    orders: list[OrderRecord]
