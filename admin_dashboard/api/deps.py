"""Shared API dependencies."""

from typing import Optional

from admin_dashboard.config import get_settings
from admin_dashboard.services.dashboard import DashboardController
from admin_dashboard.services.orders import OrdersClient

# Process-wide controller, installed by the app lifespan
_controller: Optional[DashboardController] = None


def set_dashboard_controller(controller: Optional[DashboardController]) -> None:
    """Install (or clear, with None) the process-wide controller."""
    global _controller
    _controller = controller


def get_dashboard_controller() -> DashboardController:
    """Get or create the dashboard controller singleton."""
    global _controller
    if _controller is None:
        settings = get_settings()
        _controller = DashboardController(OrdersClient(), settings.metrics_config())
    return _controller
