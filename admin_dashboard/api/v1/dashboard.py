"""Dashboard metrics endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from admin_dashboard.api.deps import get_dashboard_controller
from admin_dashboard.schemas.dashboard import DashboardView, FailedState, ReadyState
from admin_dashboard.schemas.metrics import MetricsBundle
from admin_dashboard.services.dashboard import DashboardController

router = APIRouter()


@router.get("", response_model=DashboardView)
async def get_dashboard(
    controller: DashboardController = Depends(get_dashboard_controller),
) -> DashboardView:
    """Get the current dashboard state, metrics, charts and cards."""
    return controller.view()


@router.post("/refresh", response_model=DashboardView)
async def refresh_dashboard(
    controller: DashboardController = Depends(get_dashboard_controller),
) -> DashboardView:
    """Fetch orders again and recompute metrics.

    Used for the initial load, the refresh button and retry after a
    failure. Fetch failures are reported in the returned view, not as an
    HTTP error.
    """
    await controller.refresh()
    return controller.view()


@router.get("/metrics", response_model=MetricsBundle)
async def get_metrics(
    controller: DashboardController = Depends(get_dashboard_controller),
) -> MetricsBundle:
    """Get the metrics bundle of the latest successful refresh.

    Returns 409 while no metrics are available.
    """
    state = controller.state
    if isinstance(state, ReadyState):
        return state.metrics

    if isinstance(state, FailedState):
        detail = f"Metrics unavailable: {state.error.message}"
    else:
        detail = f"Metrics unavailable: dashboard is {state.status.value}"
    raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)
