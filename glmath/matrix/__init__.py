"""
Matrix types.

Public API:
    Mat2, Mat3, Mat4  - column-major square matrices (``data[col][row]``)
    det22, det33      - closed-form determinants over plain scalars

Matrices multiply with ``*`` or ``@`` (matrix or column vector), invert
through the adjugate and leave singular matrices unchanged on
``invert()``. ``checked_inverse()`` raises SingularMatrixError instead.
Mat4 adds in-place scale/translate/rotate.
"""

from glmath.matrix._common import det22, det33
from glmath.matrix.mat2 import Mat2
from glmath.matrix.mat3 import Mat3
from glmath.matrix.mat4 import Mat4

__all__ = [
    "Mat2",
    "Mat3",
    "Mat4",
    "det22",
    "det33",
]
