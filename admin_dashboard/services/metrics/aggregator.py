"""Derive dashboard metrics from an order snapshot.

Everything here is pure: the same snapshot and config always produce the
same bundle, and nothing is cached between calls.
"""

from typing import Sequence

from admin_dashboard.schemas.metrics import (
    ChartProportion,
    ChartSlice,
    MetricCard,
    MetricsBundle,
    MetricsConfig,
)
from admin_dashboard.schemas.order import OrderRecord


def percentage(part: int, whole: int) -> int:
    """Integer percentage of part/whole, rounded half up.

    Uses integer arithmetic so ties round the same way everywhere.
    Returns 0 when whole is 0.
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def aggregate(snapshot: Sequence[OrderRecord], config: MetricsConfig) -> MetricsBundle:
    """Compute the metrics bundle for one snapshot.

    Args:
        snapshot: All orders from a single fetch
        config: Stub values passed through unchanged

    Returns:
        A new MetricsBundle
    """
    total_orders = len(snapshot)
    delivered_orders = sum(1 for order in snapshot if order.is_delivered)
    total_revenue = sum(order.price or 0 for order in snapshot)

    return MetricsBundle(
        total_orders=total_orders,
        delivered_orders=delivered_orders,
        completion_rate=percentage(delivered_orders, total_orders),
        total_revenue=total_revenue,
        profit_margin=config.profit_margin,
        growth_rate=config.growth_rate,
    )


def _split(
    title: str,
    description: str,
    percent: int,
    names: tuple[str, str],
    first: int,
    second: int,
) -> ChartProportion:
    return ChartProportion(
        title=title,
        description=description,
        percentage=percent,
        total=first + second,
        slices=(
            ChartSlice(name=names[0], value=first),
            ChartSlice(name=names[1], value=second),
        ),
    )


def build_charts(bundle: MetricsBundle) -> list[ChartProportion]:
    """Order status, revenue and growth proportions for the bundle."""
    return [
        _split(
            "Order Status",
            "Completion Rate",
            bundle.completion_rate,
            ("Completed", "Pending"),
            bundle.delivered_orders,
            bundle.pending_orders,
        ),
        _split(
            "Revenue Analytics",
            "Profit Margin",
            bundle.profit_margin,
            ("Profit", "Cost"),
            bundle.profit_margin,
            100 - bundle.profit_margin,
        ),
        _split(
            "Customer Growth",
            "Growth Rate",
            bundle.growth_rate,
            ("Growth", "Target"),
            bundle.growth_rate,
            100 - bundle.growth_rate,
        ),
    ]


def build_cards(bundle: MetricsBundle, config: MetricsConfig) -> list[MetricCard]:
    """Key metric cards; the change figures and product count are configured."""
    changes = config.card_changes
    return [
        MetricCard(
            key="total_orders",
            title="Total Orders",
            value=bundle.total_orders,
            change=changes.get("total_orders", 0),
        ),
        MetricCard(
            key="delivered_orders",
            title="Orders Delivered",
            value=bundle.delivered_orders,
            change=changes.get("delivered_orders", 0),
        ),
        MetricCard(
            key="total_revenue",
            title="Revenue Generated",
            value=bundle.total_revenue,
            change=changes.get("total_revenue", 0),
        ),
        MetricCard(
            key="total_products",
            title="Total Products",
            value=config.total_products,
            change=changes.get("total_products", 0),
        ),
    ]
