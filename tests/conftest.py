"""Pytest configuration and shared fixtures for dressing tests."""

from __future__ import annotations

import pytest

from dressing.domain import (
    CalculationInput,
    PriceCalculator,
    PricingTable,
    SlideType,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests exercising CLI or HTTP adapters")


@pytest.fixture
def table() -> PricingTable:
    """The reference price list."""
    return PricingTable.default()


@pytest.fixture
def calculator(table: PricingTable) -> PriceCalculator:
    return PriceCalculator(table)


@pytest.fixture
def reference_input(table: PricingTable) -> CalculationInput:
    """2 m x 2 m, chambranle and facade, 2 Scala slides, delivered to Tunis."""
    return CalculationInput(
        width=2.0,
        height=2.0,
        has_chambranle=True,
        has_facade=True,
        slide_type=SlideType.SCALA,
        slide_count=2,
        transport_zone=table.zone("tunis"),
        discount_percent=0.0,
    )
