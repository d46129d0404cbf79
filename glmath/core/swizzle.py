"""
Generated component and swizzle properties.

Vector-like classes (vectors and quaternions) keep their components in a
1D array attribute ``_v`` and name them with a string of axis letters in
``_axes``. The installers below turn those names into read/write
component properties and read-only swizzle properties.
"""

from __future__ import annotations

from itertools import permutations
from typing import Any


def _component(index: int, name: str) -> property:
    def getter(self: Any) -> Any:
        return self._v[index]

    def setter(self: Any, value: Any) -> None:
        self._v[index] = self.scalar.cast(value)

    return property(getter, setter, doc=f"The {name} component.")


def _swizzle(indices: tuple[int, ...], name: str, target: type) -> property:
    def getter(self: Any) -> Any:
        return target._from_np(self._v[list(indices)])

    return property(getter, doc=f"New {target.__name__} from components {name}.")


def install_components(cls: type) -> type:
    """Add one read/write property per axis name."""
    for i, axis in enumerate(cls._axes):
        setattr(cls, axis, _component(i, axis))
    return cls


def install_swizzles(cls: type, targets: dict[int, type]) -> None:
    """
    Add swizzle properties to a vector-like class.

    For every arity in targets, each ordered selection of distinct axes of
    that length becomes a property returning a new targets[arity] value.
    Identity orderings (e.g. ``xyz`` on Vec3) are included and return a copy.
    """
    for arity, target in targets.items():
        for combo in permutations(range(len(cls._axes)), arity):
            name = "".join(cls._axes[i] for i in combo)
            setattr(cls, name, _swizzle(combo, name, target))
