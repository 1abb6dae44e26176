"""
Pytest configuration file for the visualizer tests.
"""

import pytest
import numpy as np
from shviz.harmonics.config import ShvizConfig, MeshConfig, ViewerConfig
from shviz.harmonics.core import HarmonicSphere


@pytest.fixture
def small_config():
    """Return a configuration with a coarse mesh and no debounce delay."""
    return ShvizConfig(
        mesh=MeshConfig(width_segments=16, height_segments=8),
        viewer=ViewerConfig(debounce_delay=0.0, figure_size=(3.0, 3.0))
    )


@pytest.fixture
def small_sphere(small_config):
    """Return a Y_3^1 sphere on the coarse mesh."""
    return HarmonicSphere(3, 1, config=small_config)


@pytest.fixture
def sample_x():
    """Sample points of [-1, 1] including both ends."""
    return np.array([-1.0, -0.5, 0.0, 0.5, 1.0])


@pytest.fixture
def agg_backend():
    """Switch matplotlib to the non-interactive backend, skipping without it."""
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    return matplotlib
