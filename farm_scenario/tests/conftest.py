import pytest

from farm_scenario.history import ComparisonHistory
from farm_scenario.orchestrator import ScenarioOrchestrator
from farm_scenario.params import default_params


@pytest.fixture
def defaults():
    return default_params()


@pytest.fixture
def heavy_inputs(defaults):
    """Over-watered, over-fertilized, pesticide-heavy single hectare."""
    return defaults.with_changes(
        irrigation_frequency=6, fertilizer_amount=85, pesticides=45, land_size=1,
    )


@pytest.fixture
def history():
    return ComparisonHistory()


@pytest.fixture
def orchestrator(history):
    return ScenarioOrchestrator(history=history)
