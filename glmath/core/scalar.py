"""
Scalar capability abstraction.

Every glmath value stores its components in a numpy array of one dtype.
A ``Scalar`` describes that dtype and supplies the operations the rest
of the library needs from it: square root, trigonometric and arc
functions, two-argument arc tangent, max, division and the named
constants ZERO, ONE, TWO, HALF, QUARTER and PI.

Floating kinds delegate straight to numpy ufuncs. Integer kinds compute
transcendental results in float64 and truncate toward zero, and divide
with truncation, so ``INT32.sqrt(10) == 3`` and ``INT32.PI == 3``.

Domain violations (``acos(2.0)``, ``sqrt(-1.0)``) are not guarded here;
numpy's non-finite result and its RuntimeWarning propagate to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from glmath.core.exceptions import ValidationError


@dataclass(frozen=True)
class Scalar:
    """
    A registered scalar kind.

    Attributes:
        name: Short name ('float32', 'float64', 'int32', 'int64')
        dtype: numpy dtype of every component
    """
    name: str
    dtype: np.dtype

    @property
    def is_integer(self) -> bool:
        return np.issubdtype(self.dtype, np.integer)

    @property
    def epsilon(self) -> float:
        """Machine epsilon for the dtype; 0 for integer kinds."""
        if self.is_integer:
            return 0.0
        return float(np.finfo(self.dtype).eps)

    # --- conversion ---

    def cast(self, value: Any) -> np.generic:
        """Convert a single value to this scalar kind."""
        if self.is_integer:
            return self.dtype.type(np.trunc(value))
        return self.dtype.type(value)

    def cast_array(self, values: ArrayLike) -> NDArray[Any]:
        """Convert an array-like to an array of this scalar kind (always a copy)."""
        arr = np.asarray(values)
        if self.is_integer and not np.issubdtype(arr.dtype, np.integer):
            arr = np.trunc(arr)
        return arr.astype(self.dtype)

    # --- constants ---

    @property
    def ZERO(self) -> np.generic:
        return self.cast(0)

    @property
    def ONE(self) -> np.generic:
        return self.cast(1)

    @property
    def TWO(self) -> np.generic:
        return self.cast(2)

    @property
    def HALF(self) -> np.generic:
        return self.cast(0.5)

    @property
    def QUARTER(self) -> np.generic:
        return self.cast(0.25)

    @property
    def PI(self) -> np.generic:
        return self.cast(np.pi)

    # --- capabilities ---

    def _apply(self, ufunc: np.ufunc, *args: Any) -> Any:
        if self.is_integer:
            result = ufunc(*(np.asarray(a, dtype=np.float64) for a in args))
            return self.cast_array(result)[()]
        return ufunc(*(np.asarray(a, dtype=self.dtype) for a in args))[()]

    def sqrt(self, a: Any) -> Any:
        return self._apply(np.sqrt, a)

    def sin(self, a: Any) -> Any:
        return self._apply(np.sin, a)

    def cos(self, a: Any) -> Any:
        return self._apply(np.cos, a)

    def asin(self, a: Any) -> Any:
        return self._apply(np.arcsin, a)

    def acos(self, a: Any) -> Any:
        return self._apply(np.arccos, a)

    def atan2(self, a: Any, b: Any) -> Any:
        """Two-argument arc tangent of a/b, quadrant-aware."""
        return self._apply(np.arctan2, a, b)

    def max(self, a: Any, b: Any) -> Any:
        return self.cast_array(np.maximum(a, b))[()]

    def div(self, a: Any, b: Any) -> Any:
        """
        Division in this scalar kind.

        Integer kinds truncate toward zero. Works element-wise on arrays.
        """
        if self.is_integer:
            with np.errstate(divide='ignore', invalid='ignore'):
                quotient = np.asarray(a, dtype=np.float64) / np.asarray(b, dtype=np.float64)
            return self.cast_array(np.nan_to_num(quotient, nan=0.0, posinf=0.0, neginf=0.0))[()]
        return (np.asarray(a, dtype=self.dtype) / np.asarray(b, dtype=self.dtype))[()]

    def __repr__(self) -> str:
        return f"Scalar({self.name!r})"


FLOAT32 = Scalar('float32', np.dtype(np.float32))
FLOAT64 = Scalar('float64', np.dtype(np.float64))
INT32 = Scalar('int32', np.dtype(np.int32))
INT64 = Scalar('int64', np.dtype(np.int64))

# Kind used when no scalar is requested
DEFAULT_SCALAR = FLOAT64

_REGISTRY: dict[np.dtype, Scalar] = {
    s.dtype: s for s in (FLOAT32, FLOAT64, INT32, INT64)
}


def resolve_scalar(spec: Any = None) -> Scalar:
    """
    Resolve a scalar specification to a registered Scalar.

    Args:
        spec: None (default kind), a Scalar, a numpy dtype or type, or a
            dtype name such as 'float32'

    Returns:
        The registered Scalar

    Raises:
        ValidationError: If spec does not name a registered scalar kind
    """
    if spec is None:
        return DEFAULT_SCALAR
    if isinstance(spec, Scalar):
        return spec
    try:
        dtype = np.dtype(spec)
    except TypeError as e:
        raise ValidationError(f"scalar: cannot interpret {spec!r} as a dtype: {e}") from e
    try:
        return _REGISTRY[dtype]
    except KeyError:
        supported = ", ".join(s.name for s in _REGISTRY.values())
        raise ValidationError(
            f"scalar: unsupported dtype {dtype}, expected one of {supported}"
        ) from None


__all__ = [
    'Scalar',
    'FLOAT32',
    'FLOAT64',
    'INT32',
    'INT64',
    'DEFAULT_SCALAR',
    'resolve_scalar',
]
