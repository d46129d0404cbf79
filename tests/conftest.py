"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from glmath import Mat4, Vec3


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_data(rng):
    """Column-major 4x4 data, diagonally dominant so it is invertible."""
    return rng.standard_normal((4, 4)) + 4.0 * np.identity(4)


@pytest.fixture
def unit_axis():
    """A non-axis-aligned unit rotation axis."""
    return Vec3(1.0, 2.0, 3.0).normalize()


@pytest.fixture
def affine(unit_axis):
    """Mat4 with non-trivial rotation, scale and translation."""
    return (Mat4()
            .translate(Vec3(1.0, -2.0, 0.5))
            .rotate(unit_axis, 0.8)
            .scale(Vec3(2.0, 0.5, 1.5)))
