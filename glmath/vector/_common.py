"""
Shared vector machinery.

``_BaseVec`` holds the dimension-agnostic algebra for Vec2/Vec3/Vec4:
arithmetic, dot product, length, the zero-guarded normalize, angle
between vectors, comparison and display. Concrete classes only declare
their dimension and axis names; component properties and swizzles are
generated from those names.
"""

from __future__ import annotations

from typing import Any, Iterable, TypeVar
import numpy as np
from numpy.typing import NDArray

from glmath.core.formatting import format_bracketed, format_constructor
from glmath.core.scalar import Scalar, resolve_scalar
from glmath.core.tolerances import combined_tolerance, is_close
from glmath.core.validation import check_components, is_scalar_operand

V = TypeVar('V', bound='_BaseVec')


class _BaseVec:
    """
    Base for all vector types.

    Wraps a 1D numpy array whose dtype is the vector's scalar kind.
    Operations between two vectors produce a result in the left
    operand's scalar kind.
    """
    __slots__ = ('_v',)

    _dim: int = 0
    _axes: str = ''

    # numpy defers binary operators to this class, so np.float64(2) * v
    # reaches __rmul__
    __array_ufunc__ = None

    def __init__(self, *components: Any, scalar: Any = None):
        s = resolve_scalar(scalar)
        self._v = check_components(components, self._dim, self.__class__.__name__, s)

    @classmethod
    def from_iterable(cls: type[V], values: Iterable[Any], scalar: Any = None) -> V:
        """Build a vector from any iterable of components."""
        s = resolve_scalar(scalar)
        return cls._from_np(check_components(tuple(values), cls._dim, cls.__name__, s))

    @classmethod
    def _from_np(cls: type[V], arr: NDArray[Any]) -> V:
        """internal factory, no re-validation; arr must already have the right dtype."""
        instance = cls.__new__(cls)
        instance._v = arr
        return instance

    def _wrap(self: V, arr: Any) -> V:
        return self.__class__._from_np(self.scalar.cast_array(arr))

    # --- constants ---

    @classmethod
    def zero(cls: type[V], scalar: Any = None) -> V:
        s = resolve_scalar(scalar)
        return cls._from_np(s.cast_array(np.zeros(cls._dim)))

    @classmethod
    def one(cls: type[V], scalar: Any = None) -> V:
        s = resolve_scalar(scalar)
        return cls._from_np(s.cast_array(np.ones(cls._dim)))

    @classmethod
    def unit(cls: type[V], axis: int, scalar: Any = None) -> V:
        """Unit vector along the axis with the given index."""
        s = resolve_scalar(scalar)
        arr = np.zeros(cls._dim)
        arr[axis] = 1
        return cls._from_np(s.cast_array(arr))

    # --- accessors ---

    @property
    def scalar(self) -> Scalar:
        return resolve_scalar(self._v.dtype)

    def copy(self: V) -> V:
        return self.__class__._from_np(self._v.copy())

    def to_numpy(self) -> NDArray[Any]:
        return self._v.copy()

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        if dtype is not None:
            return self._v.astype(dtype)
        return self._v.copy()

    def __len__(self) -> int:
        return self._dim

    def __iter__(self):
        return iter(self._v)

    def __getitem__(self, key: int) -> Any:
        return self._v[key]

    def __setitem__(self, key: int, value: Any) -> None:
        self._v[key] = self.scalar.cast(value)

    # --- algebra ---

    def dot(self, other: _BaseVec) -> Any:
        """Sum of component-wise products."""
        return self.scalar.cast(np.sum(self._v * other._v))

    def length_sq(self) -> Any:
        """Sum of squared components; no square root."""
        return self.dot(self)

    def length(self) -> Any:
        return self.scalar.sqrt(self.length_sq())

    def normalize(self: V) -> V:
        """
        Scale this vector to unit length in place.

        A zero-length vector is left unchanged. Returns self.
        """
        length = self.length()
        if length == 0:
            return self
        self._v[:] = self.scalar.div(self._v, length)
        return self

    def get_normalized(self: V) -> V:
        """Unit-length copy; the zero vector normalizes to itself."""
        return self.copy().normalize()

    def angle_between(self, other: _BaseVec) -> Any:
        """
        Angle in radians between this vector and another.

        Not defined for zero-length vectors; the result is then NaN.
        """
        s = self.scalar
        return s.acos(s.div(self.dot(other), self.length() * other.length()))

    def set_zero(self: V) -> V:
        self._v[:] = 0
        return self

    def is_close(self, other: _BaseVec, rtol: float | None = None, atol: float | None = None) -> bool:
        """Component-wise closeness with explicit or tier-default tolerances."""
        return is_close(self._v, other._v, rtol=rtol, atol=atol,
                        tier=combined_tolerance(self.scalar, other.scalar))

    # --- operators ---

    def __add__(self: V, other: Any) -> V:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._wrap(self._v + other._v)

    def __sub__(self: V, other: Any) -> V:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._wrap(self._v - other._v)

    def __neg__(self: V) -> V:
        return self._wrap(-self._v)

    def __mul__(self: V, other: Any) -> V:
        if not is_scalar_operand(other):
            return NotImplemented
        return self._wrap(self._v * other)

    def __rmul__(self: V, other: Any) -> V:
        return self.__mul__(other)

    def __truediv__(self: V, other: Any) -> V:
        if not is_scalar_operand(other):
            return NotImplemented
        return self._wrap(self.scalar.div(self._v, other))

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.dot(other)

    def __iadd__(self: V, other: Any) -> V:
        if not isinstance(other, self.__class__):
            return NotImplemented
        self._v[:] = self.scalar.cast_array(self._v + other._v)
        return self

    def __isub__(self: V, other: Any) -> V:
        if not isinstance(other, self.__class__):
            return NotImplemented
        self._v[:] = self.scalar.cast_array(self._v - other._v)
        return self

    def __imul__(self: V, other: Any) -> V:
        if not is_scalar_operand(other):
            return NotImplemented
        self._v[:] = self.scalar.cast_array(self._v * other)
        return self

    def __itruediv__(self: V, other: Any) -> V:
        if not is_scalar_operand(other):
            return NotImplemented
        self._v[:] = self.scalar.div(self._v, other)
        return self

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None  # mutable value type

    # ordering is by magnitude
    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return bool(self.length() < other.length())

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return bool(self.length() <= other.length())

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return bool(self.length() > other.length())

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return bool(self.length() >= other.length())

    # --- display ---

    def __str__(self) -> str:
        return format_bracketed(self._v)

    def __repr__(self) -> str:
        return format_constructor(self.__class__.__name__, self._v, self.scalar)
