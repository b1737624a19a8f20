"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from admin_dashboard.schemas.metrics import MetricsConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Orders Admin Dashboard"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "production", "testing"] = "development"
    LOG_LEVEL: str = "INFO"
    REFRESH_ON_STARTUP: bool = True

    # Orders API
    ORDERS_API_URL: str = "https://ecommercebackend-8gx8.onrender.com/get-orders"
    ORDERS_API_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    # Stub metrics (not derived from order data)
    PROFIT_MARGIN: int = Field(default=65, ge=0, le=100)
    GROWTH_RATE: int = Field(default=82, ge=0, le=100)
    TOTAL_PRODUCTS: int = Field(default=89, ge=0)

    # Trend figures shown on the metric cards
    CARD_CHANGE_TOTAL_ORDERS: float = 12
    CARD_CHANGE_DELIVERED_ORDERS: float = 100
    CARD_CHANGE_REVENUE: float = 15
    CARD_CHANGE_TOTAL_PRODUCTS: float = 5

    def metrics_config(self) -> MetricsConfig:
        """Build the aggregator configuration from the stub settings."""
        return MetricsConfig(
            profit_margin=self.PROFIT_MARGIN,
            growth_rate=self.GROWTH_RATE,
            total_products=self.TOTAL_PRODUCTS,
            card_changes={
                "total_orders": self.CARD_CHANGE_TOTAL_ORDERS,
                "delivered_orders": self.CARD_CHANGE_DELIVERED_ORDERS,
                "total_revenue": self.CARD_CHANGE_REVENUE,
                "total_products": self.CARD_CHANGE_TOTAL_PRODUCTS,
            },
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
