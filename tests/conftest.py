"""Pytest configuration and shared fixtures for divider tests."""

from __future__ import annotations

import pytest

from shelves.domain.interaction import MachineSnapshot
from shelves.domain.value_objects import ShelfConfig, Units


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "scenario: end-to-end interaction scenarios")


# =============================================================================
# Shelf configurations
# =============================================================================


@pytest.fixture
def imperial_config() -> ShelfConfig:
    """36 x 72 x 12 in shelf with 3/4 in panels.

    Interior is 34.5 wide by 70.5 high.
    """
    return ShelfConfig(
        width=36, height=72, depth=12, material_thickness=0.75, units=Units.IMPERIAL
    )


@pytest.fixture
def metric_config() -> ShelfConfig:
    """91 x 183 x 30 cm shelf with 1.8 cm panels.

    Interior is 87.4 wide by 179.4 high.
    """
    return ShelfConfig(
        width=91, height=183, depth=30, material_thickness=1.8, units=Units.METRIC
    )


@pytest.fixture
def imperial_snapshot(imperial_config: ShelfConfig) -> MachineSnapshot:
    return MachineSnapshot.initial(imperial_config)


@pytest.fixture
def metric_snapshot(metric_config: ShelfConfig) -> MachineSnapshot:
    return MachineSnapshot.initial(metric_config)
