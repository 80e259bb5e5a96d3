"""Pytest fixtures for corruption_sim tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from corruption_sim.engine.sample_generator import generate_sample  # noqa: E402
from corruption_sim.engine.simulator import CorruptionSimulator  # noqa: E402


@pytest.fixture
def sample() -> np.ndarray:
    """Reference sample: n=1000, N(1, 1), seed=853."""
    return generate_sample(1000, 1.0, 1.0, 853)


@pytest.fixture
def simulator() -> CorruptionSimulator:
    """Simulator that has already run the reference scenario."""
    sim = CorruptionSimulator()
    sim.run()
    return sim
