"""Refresh lifecycle for the dashboard metrics."""

import logging

from admin_dashboard.schemas.dashboard import (
    DashboardState,
    DashboardStatus,
    DashboardView,
    FailedState,
    FetchErrorDetail,
    IdleState,
    LoadingState,
    ReadyState,
)
from admin_dashboard.schemas.metrics import MetricsConfig
from admin_dashboard.services.metrics import aggregate, build_cards, build_charts
from admin_dashboard.services.orders import FetchError, OrdersClient

logger = logging.getLogger(__name__)


class DashboardController:
    """Owns the dashboard state and decides when metrics are recomputed.

    States move Idle -> Loading -> Ready | Failed, and any refresh moves
    back to Loading. Each refresh gets a new generation number; a fetch
    that completes after a newer refresh was issued is discarded, so the
    state always reflects the latest request.
    """

    def __init__(self, fetcher: OrdersClient, config: MetricsConfig):
        """Initialize the controller.

        Args:
            fetcher: Source of order snapshots
            config: Stub metric values passed to the aggregator
        """
        self._fetcher = fetcher
        self._config = config
        self._generation = 0
        self._state: DashboardState = IdleState()

    @property
    def state(self) -> DashboardState:
        """Current lifecycle state."""
        return self._state

    @property
    def generation(self) -> int:
        """Generation of the most recently issued refresh."""
        return self._generation

    def view(self) -> DashboardView:
        """Rendering surface for the current state."""
        return DashboardView.from_state(self._state)

    def _is_stale(self, generation: int) -> bool:
        if generation == self._generation:
            return False
        logger.info(
            f"Discarding result of refresh #{generation}; "
            f"refresh #{self._generation} superseded it"
        )
        return True

    async def refresh(self) -> DashboardState:
        """Fetch a new snapshot and recompute metrics.

        Returns:
            The state after this refresh resolves. For a superseded refresh
            this is whatever state the newer request has produced so far.
        """
        if self._state.status == DashboardStatus.LOADING:
            logger.info(f"Refresh #{self._generation} still in flight, superseding it")

        self._generation += 1
        generation = self._generation
        self._state = LoadingState(generation=generation)
        logger.info(f"Refresh #{generation} started")

        try:
            snapshot = await self._fetcher.fetch()
        except FetchError as e:
            if self._is_stale(generation):
                return self._state
            self._state = FailedState(
                generation=generation,
                error=FetchErrorDetail(
                    kind=e.kind.value,
                    message=e.message,
                    status_code=e.status_code,
                ),
            )
            logger.warning(f"Refresh #{generation} failed ({e.kind.value}): {e.message}")
            return self._state

        if self._is_stale(generation):
            return self._state

        metrics = aggregate(snapshot, self._config)
        self._state = ReadyState(
            generation=generation,
            metrics=metrics,
            charts=build_charts(metrics),
            cards=build_cards(metrics, self._config),
        )
        logger.info(
            f"Refresh #{generation} ready: {metrics.total_orders} orders, "
            f"{metrics.completion_rate}% delivered"
        )
        return self._state

    async def retry(self) -> DashboardState:
        """Operator-initiated retry after a failure; same as refresh."""
        return await self.refresh()
