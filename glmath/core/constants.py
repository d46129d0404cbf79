"""
Class-level constants with value semantics.

``Vec3.ZERO`` or ``Mat4.IDENTITY`` must behave like a literal: mutating
the value obtained from one access may never affect another. The
descriptor therefore builds a fresh instance (default scalar kind) on
every access from a stored factory.
"""

from __future__ import annotations

from typing import Any, Callable


class ClassConstant:
    """Descriptor returning ``factory(owner_class)`` on each access."""

    def __init__(self, factory: Callable[[type], Any]):
        self._factory = factory
        self.__doc__ = factory.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: Any, owner: type) -> Any:
        return self._factory(owner)
