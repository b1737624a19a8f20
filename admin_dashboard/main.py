"""FastAPI application entry point."""

import asyncio
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator
import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admin_dashboard import __version__
from admin_dashboard.config import get_settings
from admin_dashboard.logging_setup import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    from admin_dashboard.api.deps import set_dashboard_controller
    from admin_dashboard.services.dashboard import DashboardController
    from admin_dashboard.services.orders import OrdersClient

    # Startup
    # One HTTP connection pool shared by every refresh
    async with httpx.AsyncClient(timeout=settings.ORDERS_API_TIMEOUT_SECONDS) as http_client:
        controller = DashboardController(
            OrdersClient(http_client=http_client),
            settings.metrics_config(),
        )
        set_dashboard_controller(controller)

        initial_refresh = None
        if settings.REFRESH_ON_STARTUP:
            logger.info("Scheduling initial dashboard load")
            initial_refresh = asyncio.create_task(controller.refresh())

        yield

        # Shutdown
        if initial_refresh is not None and not initial_refresh.done():
            initial_refresh.cancel()
            with suppress(asyncio.CancelledError):
                await initial_refresh
        set_dashboard_controller(None)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Order metrics for the e-commerce admin dashboard",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    from admin_dashboard.api.v1.router import api_router

    app.include_router(api_router, prefix="/api/v1")

    return app


# Create the application instance
app = create_app()
