"""Dashboard lifecycle services."""

from admin_dashboard.services.dashboard.controller import DashboardController

__all__ = ["DashboardController"]
