"""Plain geometric value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An integer grid position."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class RectF:
    """A rectangle in fractions of the canvas."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Size:
    """An integer width and height."""

    w: int = 0
    h: int = 0