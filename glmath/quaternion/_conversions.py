"""
Quaternion conversion kernels.

Plain functions over scalar components so that the Quat class and its
in-place rotate share one implementation of each conversion:

    rotation_block_to_quat  - Shepperd's method, matrix -> (x, y, z, w)
    quat_to_rotation_data   - (x, y, z, w) -> column-major 4x4 data
    euler_to_quat           - (roll, pitch, yaw) -> (x, y, z, w)
    quat_to_euler           - (x, y, z, w) -> (roll, pitch, yaw)

Angles follow the x=roll, y=pitch, z=yaw convention with the rotation
applied yaw first, then pitch, then roll.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from glmath.core.scalar import Scalar


def rotation_block_to_quat(data: NDArray[Any], s: Scalar) -> tuple[Any, Any, Any, Any]:
    """
    Extract a quaternion from the upper-left 3x3 block of column-major data.

    Shepperd's method: when the trace is non-negative, w is derived first
    from sqrt(trace + 1) / 2. Otherwise the largest diagonal entry selects
    which of x, y, z is derived first, so the square root argument stays
    positive near the singular configurations.

    Args:
        data: Column-major storage (data[c][r]) of a Mat3 or Mat4
        s: Scalar kind of the computation

    Returns:
        (x, y, z, w)
    """
    # m_rc: row r, column c
    m00, m11, m22 = data[0, 0], data[1, 1], data[2, 2]
    m01, m10 = data[1, 0], data[0, 1]
    m02, m20 = data[2, 0], data[0, 2]
    m12, m21 = data[2, 1], data[1, 2]

    trace = m00 + m11 + m22
    if trace >= 0:
        root = s.sqrt(trace + s.ONE)
        w = root * s.HALF
        f = s.div(s.HALF, root)
        x = (m21 - m12) * f
        y = (m02 - m20) * f
        z = (m10 - m01) * f
    elif m00 >= m11 and m00 >= m22:
        root = s.sqrt(s.ONE + m00 - m11 - m22)
        x = root * s.HALF
        f = s.div(s.HALF, root)
        y = (m01 + m10) * f
        z = (m02 + m20) * f
        w = (m21 - m12) * f
    elif m11 >= m22:
        root = s.sqrt(s.ONE + m11 - m00 - m22)
        y = root * s.HALF
        f = s.div(s.HALF, root)
        x = (m01 + m10) * f
        z = (m12 + m21) * f
        w = (m02 - m20) * f
    else:
        root = s.sqrt(s.ONE + m22 - m00 - m11)
        z = root * s.HALF
        f = s.div(s.HALF, root)
        x = (m02 + m20) * f
        y = (m12 + m21) * f
        w = (m10 - m01) * f
    return x, y, z, w


def quat_to_rotation_data(x: Any, y: Any, z: Any, w: Any, s: Scalar) -> NDArray[Any]:
    """
    Column-major 4x4 rotation for a unit quaternion.

    The fourth column is (0, 0, 0, 1). A non-unit quaternion yields a
    scaled, non-orthogonal block rather than an error.
    """
    one, two = s.ONE, s.TWO
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    xw, yw, zw = x * w, y * w, z * w

    return s.cast_array([
        [one - two * (yy + zz), two * (xy + zw), two * (xz - yw), 0],
        [two * (xy - zw), one - two * (xx + zz), two * (yz + xw), 0],
        [two * (xz + yw), two * (yz - xw), one - two * (xx + yy), 0],
        [0, 0, 0, 1],
    ])


def euler_to_quat(roll: Any, pitch: Any, yaw: Any, s: Scalar) -> tuple[Any, Any, Any, Any]:
    """Half-angle product formula; the result is not yet normalized."""
    cr, sr = s.cos(roll * s.HALF), s.sin(roll * s.HALF)
    cp, sp = s.cos(pitch * s.HALF), s.sin(pitch * s.HALF)
    cy, sy = s.cos(yaw * s.HALF), s.sin(yaw * s.HALF)

    w = cr * cp * cy + sr * sp * sy
    x = sr * cp * cy - cr * sp * sy
    y = cr * sp * cy + sr * cp * sy
    z = cr * cp * sy - sr * sp * cy
    return x, y, z, w


def quat_to_euler(x: Any, y: Any, z: Any, w: Any, s: Scalar) -> tuple[Any, Any, Any]:
    """
    Roll, pitch and yaw of a unit quaternion.

    At gimbal lock floating-point drift can push the pitch sine just past
    +-1; pitch is then clamped to +-pi/2 instead of calling asin outside
    its domain.
    """
    one, two = s.ONE, s.TWO

    roll = s.atan2(two * (w * x + y * z), one - two * (x * x + y * y))

    sin_pitch = two * (w * y - z * x)
    if np.abs(sin_pitch) >= 1:
        pitch = s.cast(np.copysign(np.pi / 2, sin_pitch))
    else:
        pitch = s.asin(sin_pitch)

    yaw = s.atan2(two * (w * z + x * y), one - two * (y * y + z * z))
    return roll, pitch, yaw
