"""
Vector types.

Public API:
    Vec2, Vec3, Vec4  - fixed-size vectors over any registered scalar kind

Every vector supports component-wise arithmetic, dot product (also
``a @ b``), length, zero-guarded normalization, angle between vectors and
swizzle properties (``v.zyx``, ``v.xy``...). Vec3 adds the cross product.
"""

from glmath.vector.vec2 import Vec2
from glmath.vector.vec3 import Vec3
from glmath.vector.vec4 import Vec4

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
]
