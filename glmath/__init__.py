"""
glmath: generic vector, matrix and quaternion algebra for Python.

A small linear-algebra kernel for geometric computation (graphics and
physics transforms), generic over the scalar kind: float32, float64,
int32 or int64, each backed by the matching numpy dtype.

Submodules:
    core: Scalar kinds, tolerances, exceptions, validation
    vector: Vec2, Vec3, Vec4
    matrix: Mat2, Mat3, Mat4 (column-major)
    quaternion: Quat
"""

__version__ = "0.1.0"

from glmath.core import (
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    Scalar,
    GlmathError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from glmath.vector import Vec2, Vec3, Vec4
from glmath.matrix import Mat2, Mat3, Mat4, det22, det33
from glmath.quaternion import Quat

__all__ = [
    "__version__",
    # Scalars
    "Scalar",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    # Types
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat2",
    "Mat3",
    "Mat4",
    "Quat",
    "det22",
    "det33",
    # Exceptions
    "GlmathError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
