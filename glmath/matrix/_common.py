"""
Shared matrix machinery.

Storage is column-major: ``data[c][r]`` is the entry at row r, column c,
so ``data[c]`` is the c-th basis axis. Every multiplication below is
written as an explicit index contraction in that layout.

Inversion uses the adjugate. Because the inverse commutes with the
transpose, applying the textbook adjugate formula directly to the
storage array yields the storage array of the inverse.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar
import numpy as np
from numpy.typing import NDArray

from glmath.core.exceptions import DimensionError, SingularMatrixError
from glmath.core.formatting import format_constructor, format_rows
from glmath.core.scalar import Scalar, resolve_scalar
from glmath.core.tolerances import combined_tolerance, is_close
from glmath.core.validation import check_square

M = TypeVar('M', bound='_BaseMat')


def det22(t00: Any, t01: Any, t10: Any, t11: Any) -> Any:
    """Determinant of a 2x2 matrix given as four scalars."""
    return t00 * t11 - t01 * t10


def det33(
    t00: Any, t01: Any, t02: Any,
    t10: Any, t11: Any, t12: Any,
    t20: Any, t21: Any, t22: Any,
) -> Any:
    """Determinant of a 3x3 matrix given as nine scalars."""
    return (t00 * (t11 * t22 - t12 * t21)
            + t01 * (t12 * t20 - t10 * t22)
            + t02 * (t10 * t21 - t11 * t20))


def cofactor_adjugate(data: NDArray[Any], minor_det: Callable[[NDArray[Any]], Any]) -> NDArray[Any]:
    """
    Adjugate (transposed cofactor matrix) of a square array.

    Args:
        data: Square array
        minor_det: Determinant of a (n-1)x(n-1) minor

    Returns:
        Array of the same shape and dtype with adj[p][q] equal to the
        signed determinant of data without row q and column p
    """
    n = data.shape[0]
    adj = np.empty_like(data)
    for p in range(n):
        for q in range(n):
            minor = np.delete(np.delete(data, q, axis=0), p, axis=1)
            cofactor = minor_det(minor)
            adj[p, q] = -cofactor if (p + q) % 2 else cofactor
    return adj


class _BaseMat(ABC):
    """
    Base for Mat2, Mat3 and Mat4.

    Subclasses set ``_size`` and ``_vector_type`` and implement ``det``
    and ``_adjugate``.
    """
    __slots__ = ('data',)

    _size: int = 0
    _vector_type: Any = None

    # numpy defers binary operators to this class
    __array_ufunc__ = None

    def __init__(self, data: Any = None, *, scalar: Any = None):
        s = resolve_scalar(scalar)
        if data is None:
            self.data = s.cast_array(np.identity(self._size))
        else:
            self.data = check_square(data, self._size, self.__class__.__name__, s)

    @classmethod
    def from_axes(cls: type[M], *axes: Any, scalar: Any = None) -> M:
        """
        Build a matrix whose columns are the given axis vectors.

        Args:
            *axes: Exactly one vector of the matrix's dimension per column
            scalar: Scalar kind, defaults to that of the first axis

        Raises:
            DimensionError: If the number or type of axes is wrong
        """
        if len(axes) != cls._size:
            raise DimensionError(
                f"{cls.__name__}.from_axes: expected {cls._size} axes, got {len(axes)}"
            )
        for i, axis in enumerate(axes):
            if not isinstance(axis, cls._vector_type):
                raise DimensionError(
                    f"{cls.__name__}.from_axes: axis {i} must be "
                    f"{cls._vector_type.__name__}, got {type(axis).__name__}"
                )
        s = axes[0].scalar if scalar is None else resolve_scalar(scalar)
        return cls._from_np(s.cast_array([axis._v for axis in axes]))

    @classmethod
    def _from_np(cls: type[M], arr: NDArray[Any]) -> M:
        instance = cls.__new__(cls)
        instance.data = arr
        return instance

    def _wrap(self: M, arr: Any) -> M:
        return self.__class__._from_np(self.scalar.cast_array(arr))

    @classmethod
    def identity(cls: type[M], scalar: Any = None) -> M:
        return cls(scalar=scalar)

    @classmethod
    def zero(cls: type[M], scalar: Any = None) -> M:
        s = resolve_scalar(scalar)
        return cls._from_np(s.cast_array(np.zeros((cls._size, cls._size))))

    # --- accessors ---

    @property
    def scalar(self) -> Scalar:
        return resolve_scalar(self.data.dtype)

    def copy(self: M) -> M:
        return self.__class__._from_np(self.data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the column-major storage, indexed [column][row]."""
        return self.data.copy()

    def to_row_major(self) -> NDArray[Any]:
        """Copy indexed [row][column], the usual mathematical layout."""
        return self.data.T.copy()

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        if dtype is not None:
            return self.data.astype(dtype)
        return self.data.copy()

    def __getitem__(self, key: Any) -> Any:
        return self.data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.data[key] = self.scalar.cast_array(value)

    def column(self, c: int) -> Any:
        return self._vector_type._from_np(self.data[c].copy())

    def row(self, r: int) -> Any:
        return self._vector_type._from_np(self.data[:, r].copy())

    # --- algebra ---

    @abstractmethod
    def det(self) -> Any:
        """Determinant by closed-form cofactor expansion."""

    @abstractmethod
    def _adjugate(self) -> NDArray[Any]:
        """Transposed cofactor matrix of the storage array."""

    def transpose(self: M) -> M:
        """Swap data[i][j] with data[j][i] in place. Returns self."""
        self.data[:] = self.data.T.copy()
        return self

    def get_transposed(self: M) -> M:
        return self.copy().transpose()

    def invert(self: M) -> M:
        """
        Invert in place via adjugate / determinant.

        A singular matrix (determinant exactly zero) is left unchanged.
        Returns self.
        """
        determinant = self.det()
        if determinant == 0:
            return self
        s = self.scalar
        determinant_inv = s.div(s.ONE, determinant)
        self.data[:] = s.cast_array(self._adjugate() * determinant_inv)
        return self

    def get_inverted(self: M) -> M:
        """Inverted copy; a singular matrix is returned unchanged."""
        return self.copy().invert()

    def checked_inverse(self: M) -> M:
        """
        Inverted copy.

        Raises:
            SingularMatrixError: If the determinant is exactly zero
        """
        determinant = self.det()
        if determinant == 0:
            name = self.__class__.__name__
            raise SingularMatrixError(
                f"{name} is singular (determinant is zero) and cannot be inverted",
                matrix_name=name,
                determinant=float(determinant),
            )
        return self.get_inverted()

    def set_identity(self: M) -> M:
        self.data[:] = np.identity(self._size)
        return self

    def set_zero(self: M) -> M:
        self.data[:] = 0
        return self

    def _product(self, rhs: _BaseMat) -> NDArray[Any]:
        # result[c][r] = sum_k self.data[k][r] * rhs.data[c][k]
        return np.einsum('kr,ck->cr', self.data, rhs.data)

    def _transform(self, v: Any) -> Any:
        # result[r] = sum_k self.data[k][r] * v[k]
        out = np.einsum('kr,k->r', self.data, v._v)
        return self._vector_type._from_np(self.scalar.cast_array(out))

    def is_close(self, other: _BaseMat, rtol: float | None = None, atol: float | None = None) -> bool:
        return is_close(self.data, other.data, rtol=rtol, atol=atol,
                        tier=combined_tolerance(self.scalar, other.scalar))

    # --- operators ---

    def __add__(self: M, other: Any) -> M:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._wrap(self.data + other.data)

    def __sub__(self: M, other: Any) -> M:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._wrap(self.data - other.data)

    def __neg__(self: M) -> M:
        return self._wrap(-self.data)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, self.__class__):
            return self._wrap(self._product(other))
        if isinstance(other, self._vector_type):
            return self._transform(other)
        return NotImplemented

    __matmul__ = __mul__

    def __iadd__(self: M, other: Any) -> M:
        if not isinstance(other, self.__class__):
            return NotImplemented
        self.data[:] = self.scalar.cast_array(self.data + other.data)
        return self

    def __isub__(self: M, other: Any) -> M:
        if not isinstance(other, self.__class__):
            return NotImplemented
        self.data[:] = self.scalar.cast_array(self.data - other.data)
        return self

    def __imul__(self: M, other: Any) -> M:
        if not isinstance(other, self.__class__):
            return NotImplemented
        self.data[:] = self.scalar.cast_array(self._product(other))
        return self

    __imatmul__ = __imul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None  # mutable value type

    # --- display ---

    def __str__(self) -> str:
        return format_rows(self.data[:, r] for r in range(self._size))

    def __repr__(self) -> str:
        return format_constructor(self.__class__.__name__, [self.data.tolist()], self.scalar)
