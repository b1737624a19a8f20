"""Tests for settings validation and the metrics config they produce."""
import pytest
from pydantic import ValidationError

from admin_dashboard.config import Settings


def test_defaults_match_dashboard_stubs():
    config = Settings(_env_file=None).metrics_config()

    assert config.profit_margin == 65
    assert config.growth_rate == 82
    assert config.total_products == 89
    assert config.card_changes == {
        "total_orders": 12,
        "delivered_orders": 100,
        "total_revenue": 15,
        "total_products": 5,
    }


def test_stub_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("PROFIT_MARGIN", "40")
    monkeypatch.setenv("GROWTH_RATE", "0")

    config = Settings(_env_file=None).metrics_config()

    assert config.profit_margin == 40
    assert config.growth_rate == 0


@pytest.mark.parametrize("field", ["PROFIT_MARGIN", "GROWTH_RATE"])
@pytest.mark.parametrize("value", [-1, 101])
def test_percentages_outside_0_100_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, ORDERS_API_TIMEOUT_SECONDS=0)
