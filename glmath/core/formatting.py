"""
Display helpers shared by vectors, matrices and quaternions.

The string forms are for diagnostics only. They are not a parsing
format and are not guaranteed stable across versions.
"""

from __future__ import annotations

from typing import Any, Iterable

from glmath.core.scalar import Scalar, DEFAULT_SCALAR


def format_component(value: Any) -> str:
    # numpy scalars print as plain numbers via item()
    return repr(value.item()) if hasattr(value, 'item') else repr(value)


def format_bracketed(values: Iterable[Any]) -> str:
    """'[1.0, 2.0, 3.0]'"""
    return "[" + ", ".join(format_component(v) for v in values) + "]"


def format_constructor(name: str, values: Iterable[Any], scalar: Scalar) -> str:
    """'Vec3(1.0, 2.0, 3.0)', with the scalar kind appended unless it is the default."""
    args = ", ".join(format_component(v) for v in values)
    if scalar != DEFAULT_SCALAR:
        args += f", scalar={scalar.name!r}"
    return f"{name}({args})"


def format_rows(rows: Iterable[Iterable[Any]]) -> str:
    """One bracketed row per line."""
    return "\n".join(format_bracketed(row) for row in rows)
