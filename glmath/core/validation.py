"""
Input validation utilities for glmath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Numerical edge cases (zero length, singularity) are NOT validation
      failures; the algebra handles those itself
"""

from __future__ import annotations

from numbers import Number
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from glmath.core.exceptions import ValidationError, DimensionError
from glmath.core.scalar import Scalar


def check_numeric(values: ArrayLike, name: str) -> NDArray[Any]:
    """
    Convert input to a numeric numpy array.

    Args:
        values: Components to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a numeric (or bool) dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_components(values: ArrayLike, count: int, name: str, scalar: Scalar) -> NDArray[Any]:
    """
    Validate a flat sequence of components and convert it to the scalar kind.

    Args:
        values: Components
        count: Required number of components
        name: Parameter name for error messages
        scalar: Target scalar kind

    Returns:
        1D array of length count with the scalar's dtype

    Raises:
        ValidationError: If components are non-numeric
        DimensionError: If the number of components is wrong
    """
    arr = check_numeric(values, name)
    if arr.shape != (count,):
        raise DimensionError(
            f"{name}: expected {count} components, got shape {arr.shape}"
        )
    return scalar.cast_array(arr)


def check_square(values: ArrayLike, size: int, name: str, scalar: Scalar) -> NDArray[Any]:
    """
    Validate column-major matrix data and convert it to the scalar kind.

    Args:
        values: Nested sequence indexed [column][row]
        size: Required number of rows and columns
        name: Parameter name for error messages
        scalar: Target scalar kind

    Returns:
        (size, size) array with the scalar's dtype

    Raises:
        ValidationError: If data is non-numeric
        DimensionError: If data is not size x size
    """
    arr = check_numeric(values, name)
    if arr.shape != (size, size):
        raise DimensionError(
            f"{name}: expected a {size}x{size} matrix, got shape {arr.shape}"
        )
    return scalar.cast_array(arr)


def check_dimension(value: Any, expected: type, name: str) -> None:
    """
    Verify a value is of the expected vector or matrix type.

    Args:
        value: Value to check
        expected: Required glmath type
        name: Parameter name for error messages

    Raises:
        DimensionError: If value is not an instance of expected
    """
    if not isinstance(value, expected):
        raise DimensionError(
            f"{name}: expected {expected.__name__}, got {type(value).__name__}"
        )


def is_scalar_operand(value: Any) -> bool:
    """True for real numbers usable as a scalar factor (bools excluded)."""
    return isinstance(value, (Number, np.number)) and not isinstance(value, bool)
