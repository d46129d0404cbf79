"""Two-component vector."""

from __future__ import annotations

from typing import Any

from glmath.core.constants import ClassConstant
from glmath.core.swizzle import install_components, install_swizzles
from glmath.vector._common import _BaseVec


@install_components
class Vec2(_BaseVec):
    """A 2-dimensional vector (x, y)."""
    __slots__ = ()

    _dim = 2
    _axes = 'xy'

    def __init__(self, x: Any, y: Any, *, scalar: Any = None):
        super().__init__(x, y, scalar=scalar)

    ZERO = ClassConstant(lambda cls: cls.zero())
    ONE = ClassConstant(lambda cls: cls.one())
    X = ClassConstant(lambda cls: cls.unit(0))
    Y = ClassConstant(lambda cls: cls.unit(1))

    @classmethod
    def unit_x(cls, scalar: Any = None) -> Vec2:
        return cls.unit(0, scalar)

    @classmethod
    def unit_y(cls, scalar: Any = None) -> Vec2:
        return cls.unit(1, scalar)


install_swizzles(Vec2, {2: Vec2})
