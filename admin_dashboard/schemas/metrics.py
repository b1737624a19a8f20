"""Metrics schemas."""

from pydantic import BaseModel, ConfigDict, Field


class MetricsConfig(BaseModel):
    """Configured values that are presented as metrics but not derived from orders.

    profit_margin and growth_rate are stubs pending a cost model and
    historical comparison data respectively.
    """

    model_config = ConfigDict(frozen=True)

    profit_margin: int = Field(default=65, ge=0, le=100)
    growth_rate: int = Field(default=82, ge=0, le=100)
    total_products: int = Field(default=89, ge=0)
    card_changes: dict[str, float] = Field(default_factory=dict)


class MetricsBundle(BaseModel):
    """Aggregate values derived from one order snapshot."""

    model_config = ConfigDict(frozen=True)

    total_orders: int
    delivered_orders: int
    completion_rate: int
    total_revenue: float
    profit_margin: int
    growth_rate: int

    @property
    def pending_orders(self) -> int:
        return self.total_orders - self.delivered_orders


class ChartSlice(BaseModel):
    """One named share of a proportion chart."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int | float


class ChartProportion(BaseModel):
    """A two-part split whose slices sum to ``total``."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    percentage: int
    total: int | float
    slices: tuple[ChartSlice, ChartSlice]


class MetricCard(BaseModel):
    """A numeric card with a trend figure."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    value: int | float
    change: float
