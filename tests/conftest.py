"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def engine():
    """Provide a freshly cleared CalculatorEngine."""
    from keycalc import CalculatorEngine

    return CalculatorEngine()


@pytest.fixture
def press():
    """Feed key names to an engine and return the final snapshot."""
    from keycalc import action_for_key, dispatch

    def _press(engine, *keys):
        snapshot = engine.snapshot
        for key in keys:
            snapshot = dispatch(engine, action_for_key(key))
        return snapshot

    return _press


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting display values."""
    return [
        0,
        1,
        -1,
        0.5,
        -0.5,
        100,
        -100,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        0.1 + 0.2,  # Floating point edge case
    ]
