"""Pytest fixtures for edgematch tests."""

import tempfile

import numpy as np
import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def example_path():
    """Sampled path of the single-tab example edge."""
    from edgematch.edge import example_edge
    return example_edge().as_path()


@pytest.fixture
def second_path():
    """Sampled path of the second example edge, which crosses the first."""
    from edgematch.edge import second_example_edge
    return second_example_edge().as_path()


@pytest.fixture
def zigzag_paths():
    """A zigzag and a straight line between (0,0) and (4,0), crossing at (2,0).

    The zigzag encloses a triangle of area 1 on either side of the line.
    """
    zigzag = np.array([[0, 0], [1, 1], [2, 0], [3, -1], [4, 0]], dtype=float)
    line = np.array([[0, 0], [1, 0], [2, 0], [3, 0], [4, 0]], dtype=float)
    return zigzag, line


@pytest.fixture
def default_config():
    """Create default matching configuration."""
    from edgematch.config import MatchConfig
    return MatchConfig()
