"""
Quaternion type.

A Quat stores (x, y, z, w) for w + xi + yj + zk. The constructor takes
the real part first, ``Quat(w, x, y, z)``, so ``Quat()`` and
``Quat(1, 0, 0, 0)`` are the identity rotation. Unit length is not
enforced; rotation-related methods assume it and ``normalize()``
restores it.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from glmath.core.constants import ClassConstant
from glmath.core.exceptions import DimensionError
from glmath.core.formatting import format_bracketed, format_constructor
from glmath.core.scalar import Scalar, resolve_scalar
from glmath.core.swizzle import install_components, install_swizzles
from glmath.core.tolerances import combined_tolerance, is_close
from glmath.core.validation import check_components, check_dimension, is_scalar_operand
from glmath.matrix import Mat3, Mat4
from glmath.quaternion._conversions import (
    euler_to_quat,
    quat_to_euler,
    quat_to_rotation_data,
    rotation_block_to_quat,
)
from glmath.vector import Vec3


def _hamilton(a: NDArray[Any], b: NDArray[Any]) -> list[Any]:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return [
        ax * bw + aw * bx + ay * bz - az * by,
        ay * bw + aw * by + az * bx - ax * bz,
        az * bw + aw * bz + ax * by - ay * bx,
        aw * bw - ax * bx - ay * by - az * bz,
    ]


@install_components
class Quat:
    """
    A quaternion (x, y, z, w) over any registered scalar kind.

    Construction:
        Quat(w, x, y, z)
        Quat.from_xyzw(x, y, z, w)
        Quat.from_axis_angle(axis, angle)
        Quat.from_euler_angles(Vec3(roll, pitch, yaw))
        Quat.from_matrix(m)
        Quat.look_rotation(forward, up)
    """
    __slots__ = ('_v',)

    _axes = 'xyzw'

    # numpy defers binary operators to this class
    __array_ufunc__ = None

    def __init__(self, w: Any = 1, x: Any = 0, y: Any = 0, z: Any = 0, *, scalar: Any = None):
        s = resolve_scalar(scalar)
        self._v = check_components((x, y, z, w), 4, self.__class__.__name__, s)

    @classmethod
    def from_xyzw(cls, x: Any, y: Any, z: Any, w: Any, scalar: Any = None) -> Quat:
        """Build from components in storage order."""
        return cls(w, x, y, z, scalar=scalar)

    @classmethod
    def _from_np(cls, arr: NDArray[Any]) -> Quat:
        instance = cls.__new__(cls)
        instance._v = arr
        return instance

    def _wrap(self, arr: Any) -> Quat:
        return Quat._from_np(self.scalar.cast_array(arr))

    @classmethod
    def identity(cls, scalar: Any = None) -> Quat:
        return cls(scalar=scalar)

    @classmethod
    def zero(cls, scalar: Any = None) -> Quat:
        return cls(0, 0, 0, 0, scalar=scalar)

    IDENTITY = ClassConstant(lambda cls: cls.identity())
    ZERO = ClassConstant(lambda cls: cls.zero())

    # --- accessors ---

    @property
    def scalar(self) -> Scalar:
        return resolve_scalar(self._v.dtype)

    @property
    def xyz(self) -> Vec3:
        """The vector part."""
        return Vec3._from_np(self._v[:3].copy())

    def copy(self) -> Quat:
        return Quat._from_np(self._v.copy())

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the components in storage order (x, y, z, w)."""
        return self._v.copy()

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        if dtype is not None:
            return self._v.astype(dtype)
        return self._v.copy()

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        return iter(self._v)

    def __getitem__(self, key: int) -> Any:
        return self._v[key]

    def __setitem__(self, key: int, value: Any) -> None:
        """Set a component by storage index (0=x, 1=y, 2=z, 3=w)."""
        self._v[key] = self.scalar.cast(value)

    def set_identity(self) -> Quat:
        self._v[:] = (0, 0, 0, 1)
        return self

    # --- algebra ---

    def dot(self, other: Quat) -> Any:
        return self.scalar.cast(np.sum(self._v * other._v))

    def length_sq(self) -> Any:
        """Sum of the four squared components."""
        return self.dot(self)

    def length(self) -> Any:
        return self.scalar.sqrt(self.length_sq())

    def normalize(self) -> Quat:
        """
        Scale to unit length in place.

        A zero quaternion is left unchanged, matching vector normalize.
        Returns self.
        """
        length = self.length()
        if length == 0:
            return self
        self._v[:] = self.scalar.div(self._v, length)
        return self

    def get_normalized(self) -> Quat:
        return self.copy().normalize()

    def conjugate(self) -> Quat:
        """Copy with the vector part negated."""
        return self._wrap(self._v * np.array([-1, -1, -1, 1]))

    def invert(self) -> Quat:
        """
        Replace with the normalized conjugate, in place.

        For a unit quaternion this is the inverse rotation. Returns self.
        """
        self._v[:3] = -self._v[:3]
        return self.normalize()

    def get_inverted(self) -> Quat:
        return self.copy().invert()

    def is_close(self, other: Quat, rtol: float | None = None, atol: float | None = None) -> bool:
        return is_close(self._v, other._v, rtol=rtol, atol=atol,
                        tier=combined_tolerance(self.scalar, other.scalar))

    # --- conversions ---

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: Any, scalar: Any = None) -> Quat:
        """
        Rotation of angle radians about axis.

        xyz = axis * sin(angle / 2), w = cos(angle / 2). The axis must be
        unit length.
        """
        check_dimension(axis, Vec3, "axis")
        s = axis.scalar if scalar is None else resolve_scalar(scalar)
        half = s.cast(angle) * s.HALF
        sin_half = s.sin(half)
        return cls._from_np(s.cast_array(np.append(axis._v * sin_half, s.cos(half))))

    @classmethod
    def from_euler_angles(cls, angles: Vec3, scalar: Any = None) -> Quat:
        """
        Rotation from Euler angles in radians (x=roll, y=pitch, z=yaw).

        The result is normalized.
        """
        check_dimension(angles, Vec3, "angles")
        s = angles.scalar if scalar is None else resolve_scalar(scalar)
        roll, pitch, yaw = (s.cast(a) for a in angles._v)
        return cls._from_np(s.cast_array(euler_to_quat(roll, pitch, yaw, s))).normalize()

    def to_euler(self) -> Vec3:
        """Vec3(roll, pitch, yaw) in radians; pitch is clamped at gimbal lock."""
        s = self.scalar
        return Vec3._from_np(s.cast_array(quat_to_euler(*self._v, s)))

    def to_matrix(self) -> Mat4:
        """Mat4 rotation with identity translation; assumes unit length."""
        return Mat4._from_np(quat_to_rotation_data(*self._v, self.scalar))

    @classmethod
    def from_matrix(cls, m: Mat3 | Mat4) -> Quat:
        """
        Quaternion of the rotation in m's upper-left 3x3 block.

        Uses Shepperd's method (see rotation_block_to_quat).
        """
        if not isinstance(m, (Mat3, Mat4)):
            raise DimensionError(
                f"m: expected Mat3 or Mat4, got {type(m).__name__}"
            )
        s = m.scalar
        return cls._from_np(s.cast_array(rotation_block_to_quat(m.data, s)))

    def rotate(self, axis: Vec3, angle: Any) -> Quat:
        """
        Compose a rotation of angle radians about axis, in place.

        Goes through the matrix form: Mat4.rotate, then re-extraction with
        Shepperd's method and renormalization. Returns self.
        """
        s = self.scalar
        m = self.to_matrix().rotate(axis, angle)
        self._v[:] = s.cast_array(rotation_block_to_quat(m.data, s))
        return self.normalize()

    def get_rotated(self, axis: Vec3, angle: Any) -> Quat:
        return self.copy().rotate(axis, angle)

    @classmethod
    def slerp(cls, a: Quat, b: Quat, t: Any) -> Quat:
        """
        Blend from a to b by t along the shorter arc.

        b is negated when a . b < 0, then the four components are blended
        linearly with weights (1 - t, t) and the result renormalized. This
        is a normalized linear blend, not an angle-uniform slerp.
        """
        s = a.scalar
        target = -b._v if a.dot(b) < 0 else b._v
        blended = a._v * (s.ONE - t) + target * t
        return cls._from_np(s.cast_array(blended)).normalize()

    def _rotate_vector(self, v: Vec3) -> Vec3:
        return (self.to_matrix() * v.extend(0)).xyz

    def forward(self) -> Vec3:
        """-Z rotated by this quaternion."""
        return self._rotate_vector(-Vec3.unit_z(self.scalar))

    def up(self) -> Vec3:
        """+Y rotated by this quaternion."""
        return self._rotate_vector(Vec3.unit_y(self.scalar))

    def right(self) -> Vec3:
        """+X rotated by this quaternion."""
        return self._rotate_vector(Vec3.unit_x(self.scalar))

    @classmethod
    def look_rotation(cls, forward: Vec3, up: Vec3) -> Quat:
        """
        Rotation whose forward() is the given direction.

        Both inputs are normalized. right = forward x up, up is
        re-orthogonalized against forward, and the basis {right, up,
        -forward} (the forward axis is -Z) is converted with from_matrix.
        Parallel inputs give a degenerate basis and a RuntimeWarning.
        """
        check_dimension(forward, Vec3, "forward")
        check_dimension(up, Vec3, "up")
        f = forward.get_normalized()
        u = up.get_normalized()
        right = f.cross(u)
        if right.length() == 0:
            warnings.warn(
                "look_rotation: forward and up are parallel, the rotation basis "
                "is degenerate",
                RuntimeWarning,
                stacklevel=2,
            )
        right.normalize()
        u = right.cross(f)
        basis = Mat3.from_axes(right, u, -f)
        return cls.from_matrix(basis).normalize()

    # --- operators ---

    def __add__(self, other: Any) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return self._wrap(self._v + other._v)

    def __sub__(self, other: Any) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return self._wrap(self._v - other._v)

    def __neg__(self) -> Quat:
        return self._wrap(-self._v)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Quat):
            return self._wrap(_hamilton(self._v, other._v))
        if isinstance(other, Vec3):
            return self._rotate_vector(other)
        if is_scalar_operand(other):
            return self._wrap(self._v * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Quat:
        if not is_scalar_operand(other):
            return NotImplemented
        return self._wrap(self._v * other)

    def __truediv__(self, other: Any) -> Quat:
        if not is_scalar_operand(other):
            return NotImplemented
        return self._wrap(self.scalar.div(self._v, other))

    def __iadd__(self, other: Any) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        self._v[:] = self.scalar.cast_array(self._v + other._v)
        return self

    def __isub__(self, other: Any) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        self._v[:] = self.scalar.cast_array(self._v - other._v)
        return self

    def __imul__(self, other: Any) -> Quat:
        if isinstance(other, Quat):
            self._v[:] = self.scalar.cast_array(_hamilton(self._v, other._v))
            return self
        if is_scalar_operand(other):
            self._v[:] = self.scalar.cast_array(self._v * other)
            return self
        return NotImplemented

    def __itruediv__(self, other: Any) -> Quat:
        if not is_scalar_operand(other):
            return NotImplemented
        self._v[:] = self.scalar.div(self._v, other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None  # mutable value type

    # --- display ---

    def __str__(self) -> str:
        return format_bracketed(self._v)

    def __repr__(self) -> str:
        x, y, z, w = self._v
        return format_constructor('Quat', (w, x, y, z), self.scalar)


install_swizzles(Quat, {4: Quat})
