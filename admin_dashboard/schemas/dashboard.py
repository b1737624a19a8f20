"""Dashboard lifecycle state and view schemas."""

import enum
from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from admin_dashboard.schemas.metrics import ChartProportion, MetricCard, MetricsBundle


class DashboardStatus(str, enum.Enum):
    """Lifecycle status enumeration."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class FetchErrorDetail(BaseModel):
    """A fetch failure as shown to the operator."""

    model_config = ConfigDict(frozen=True)

    kind: str
    message: str
    status_code: Optional[int] = None


class _State(BaseModel):
    model_config = ConfigDict(frozen=True)

    generation: int = 0
    changed_at: datetime = Field(default_factory=_now)


class IdleState(_State):
    status: Literal[DashboardStatus.IDLE] = DashboardStatus.IDLE


class LoadingState(_State):
    status: Literal[DashboardStatus.LOADING] = DashboardStatus.LOADING


class ReadyState(_State):
    status: Literal[DashboardStatus.READY] = DashboardStatus.READY
    metrics: MetricsBundle
    charts: list[ChartProportion]
    cards: list[MetricCard]


class FailedState(_State):
    status: Literal[DashboardStatus.FAILED] = DashboardStatus.FAILED
    error: FetchErrorDetail


DashboardState = Annotated[
    Union[IdleState, LoadingState, ReadyState, FailedState],
    Field(discriminator="status"),
]


class DashboardView(BaseModel):
    """Everything the presentation layer needs to render the dashboard."""

    status: DashboardStatus
    generation: int
    changed_at: datetime
    metrics: Optional[MetricsBundle] = None
    charts: list[ChartProportion] = Field(default_factory=list)
    cards: list[MetricCard] = Field(default_factory=list)
    error: Optional[FetchErrorDetail] = None

    @classmethod
    def from_state(cls, state: DashboardState) -> "DashboardView":
        fields: dict = {
            "status": state.status,
            "generation": state.generation,
            "changed_at": state.changed_at,
        }
        if isinstance(state, ReadyState):
            fields.update(metrics=state.metrics, charts=state.charts, cards=state.cards)
        elif isinstance(state, FailedState):
            fields["error"] = state.error
        return cls(**fields)
