"""Metrics aggregation services."""

from admin_dashboard.services.metrics.aggregator import (
    aggregate,
    build_cards,
    build_charts,
    percentage,
)

__all__ = [
    "aggregate",
    "build_cards",
    "build_charts",
    "percentage",
]
