"""
Quaternion type.

Public API:
    Quat  - rotation quaternion, constructed as Quat(w, x, y, z)

Conversions to and from rotation matrices (Shepperd's method), Euler
angles (with the gimbal-lock clamp) and axis-angle, in-place rotation,
sign-corrected normalized blending (``Quat.slerp``), basis vectors and
look rotation.
"""

from glmath.quaternion.quat import Quat

__all__ = [
    "Quat",
]
