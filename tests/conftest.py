"""
Pytest fixtures for the SWNT test suite.

Provides seeded and scripted dice, and isolates the process-wide dice
roller and table registry between tests.
"""

import pytest

from swnt.data_models import DiceRoller, reset_dice_roller
from swnt.tables.table_registry import TableRegistry, reset_table_registry
from tests.helpers import ScriptedRandom


# =============================================================================
# GLOBAL STATE
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_globals():
    """Give every test a fresh process-wide roller and registry."""
    reset_dice_roller()
    reset_table_registry()
    yield
    reset_dice_roller()
    reset_table_registry()


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def clean_dice():
    """Provide a DiceRoller seeded from the clock."""
    return DiceRoller()


@pytest.fixture
def scripted_dice():
    """Factory for DiceRollers that return scripted faces in order."""

    def _make(*values: int) -> DiceRoller:
        return DiceRoller(rng=ScriptedRandom(values))

    return _make


# =============================================================================
# REGISTRY FIXTURES
# =============================================================================


@pytest.fixture
def registry():
    """An empty, private table registry."""
    return TableRegistry()
