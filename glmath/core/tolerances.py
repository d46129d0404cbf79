"""
Tolerance tiers for approximate equality.

``==`` on vectors, matrices and quaternions compares component-wise
within the looser of the two operands' tiers, so the result does not
depend on operand order:
- FLOAT64: tight, a few ulps of accumulated rounding
- FLOAT32: relaxed for single-precision arithmetic
- INTEGER: exact

Callers that need a different tolerance use ``is_close(...)`` with
explicit ``rtol``/``atol``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from glmath.core.scalar import Scalar


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FLOAT64_TIER = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='float64',
    description='double precision, accumulated rounding of a few operations',
)

FLOAT32_TIER = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='float32',
    description='single precision',
)

INTEGER_TIER = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='integer',
    description='integer kinds compare exactly',
)


def select_tolerance(scalar: Scalar) -> ToleranceTier:
    """Select the tolerance tier for a scalar kind."""
    if scalar.is_integer:
        return INTEGER_TIER
    if scalar.dtype == np.float32:
        return FLOAT32_TIER
    return FLOAT64_TIER


def combined_tolerance(first: Scalar, second: Scalar) -> ToleranceTier:
    """
    Tier for comparing values of two scalar kinds.

    The looser of the two tiers, so that comparing a float32 value with a
    float64 value gives the same answer in either order.
    """
    a = select_tolerance(first)
    b = select_tolerance(second)
    return a if (a.rtol, a.atol) >= (b.rtol, b.atol) else b


def is_close(
    a: ArrayLike,
    b: ArrayLike,
    rtol: float | None = None,
    atol: float | None = None,
    tier: ToleranceTier = FLOAT64_TIER,
) -> bool:
    """
    Check that every component of a is close to the matching one of b.

    Uses the symmetric formula: |a - b| <= atol + rtol * max(|a|, |b|)

    Args:
        a: First value(s)
        b: Second value(s), same shape as a
        rtol: Relative tolerance (defaults to the tier's)
        atol: Absolute tolerance (defaults to the tier's)
        tier: Tier providing the defaults

    Returns:
        True when all components are close
    """
    rtol = tier.rtol if rtol is None else rtol
    atol = tier.atol if atol is None else atol
    a_arr: Any = np.asarray(a, dtype=np.float64)
    b_arr: Any = np.asarray(b, dtype=np.float64)
    if a_arr.shape != b_arr.shape:
        return False
    scale = np.maximum(np.abs(a_arr), np.abs(b_arr))
    return bool(np.all(np.abs(a_arr - b_arr) <= atol + rtol * scale))


__all__ = [
    'ToleranceTier',
    'FLOAT64_TIER',
    'FLOAT32_TIER',
    'INTEGER_TIER',
    'select_tolerance',
    'combined_tolerance',
    'is_close',
]
