"""
Core infrastructure for glmath.

This module provides the shared abstractions used by the vector, matrix
and quaternion subpackages.

Key components:
    scalar: Scalar capability abstraction (FLOAT32, FLOAT64, INT32, INT64)
    tolerances: Tolerance tiers backing approximate equality
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: Display helpers
"""

from glmath.core.scalar import (
    Scalar,
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    DEFAULT_SCALAR,
    resolve_scalar,
)
from glmath.core.tolerances import (
    ToleranceTier,
    FLOAT64_TIER,
    FLOAT32_TIER,
    INTEGER_TIER,
    select_tolerance,
    combined_tolerance,
    is_close,
)
from glmath.core.exceptions import (
    GlmathError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Scalars
    "Scalar",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "DEFAULT_SCALAR",
    "resolve_scalar",
    # Tolerances
    "ToleranceTier",
    "FLOAT64_TIER",
    "FLOAT32_TIER",
    "INTEGER_TIER",
    "select_tolerance",
    "combined_tolerance",
    "is_close",
    # Exceptions
    "GlmathError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
