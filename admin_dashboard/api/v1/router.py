"""API v1 router aggregator."""

from fastapi import APIRouter

from admin_dashboard.api.v1 import dashboard, health

api_router = APIRouter()

# Health check
api_router.include_router(health.router, prefix="/health", tags=["health"])

# Dashboard
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
