"""Script to fetch orders once and print the dashboard metrics."""

import argparse
import asyncio
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(__file__).rsplit("scripts", 1)[0])

from admin_dashboard.config import get_settings
from admin_dashboard.logging_setup import setup_logging
from admin_dashboard.schemas.dashboard import DashboardStatus, DashboardView
from admin_dashboard.services.dashboard import DashboardController
from admin_dashboard.services.orders import OrdersClient

settings = get_settings()


def print_summary(view: DashboardView) -> None:
    """Print a human-readable summary of the view."""
    if view.status == DashboardStatus.FAILED and view.error:
        print(f"Dashboard error ({view.error.kind}): {view.error.message}")
        return

    print("=== Dashboard ===\n")
    for card in view.cards:
        print(f"{card.title:<20} {card.value:>12,.0f}   change {card.change:+.0f}%")
    print()
    for chart in view.charts:
        first, second = chart.slices
        print(
            f"{chart.title:<20} {chart.description}: {chart.percentage}% "
            f"({first.name} {first.value:g} / {second.name} {second.value:g})"
        )


async def run(url: str, as_json: bool) -> int:
    """Run one refresh and print the result."""
    controller = DashboardController(
        OrdersClient(url=url),
        settings.metrics_config(),
    )
    await controller.refresh()
    view = controller.view()

    if as_json:
        print(view.model_dump_json(indent=2))
    else:
        print_summary(view)

    return 1 if view.status == DashboardStatus.FAILED else 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print order dashboard metrics")
    parser.add_argument(
        "--url",
        default=settings.ORDERS_API_URL,
        help="Orders endpoint (default: ORDERS_API_URL)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full dashboard view as JSON",
    )
    args = parser.parse_args()

    setup_logging()
    sys.exit(asyncio.run(run(args.url, args.json)))


if __name__ == "__main__":
    main()
