"""Pytest configuration for the polynomial test suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the repo root, so parent is the root)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so random sweeps are reproducible."""
    return np.random.default_rng(13)
