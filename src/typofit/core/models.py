# SPDX-License-Identifier: Apache-2.0
"""Geometry models shared by the font scalers.

Coordinates are unitless; callers use whatever unit their measurer and
layout use (points, pixels).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

Point = Sequence[float]


@dataclass(frozen=True)
class BBox:
    """Axis-aligned bounding box.

    Attributes:
        x0: Left X coordinate
        y0: Lower Y coordinate
        x1: Right X coordinate
        y1: Upper Y coordinate
    """

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        """Width of the bounding box."""
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        """Height of the bounding box."""
        return self.y1 - self.y0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"x0": self.x0, "y0": self.y0, "x1": self.x1, "y1": self.y1}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BBox:
        """Create from dictionary."""
        return cls(
            x0=float(data["x0"]),
            y0=float(data["y0"]),
            x1=float(data["x1"]),
            y1=float(data["y1"]),
        )

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> BBox:
        """Create the smallest box enclosing a group of 2D points.

        Degenerate input never raises: an empty group gives a zero box
        at the origin, and a single point or a vertical/horizontal line
        gives a zero width and/or height.

        Args:
            points: Iterable of (x, y) pairs. Extra coordinates are ignored.

        Returns:
            Enclosing BBox.
        """
        xs: list[float] = []
        ys: list[float] = []
        for pt in points:
            xs.append(float(pt[0]))
            ys.append(float(pt[1]))

        if not xs:
            return cls(0.0, 0.0, 0.0, 0.0)
        return cls(x0=min(xs), y0=min(ys), x1=max(xs), y1=max(ys))

    @classmethod
    def from_size(cls, width: float, height: float) -> BBox:
        """Create a box anchored at the origin."""
        return cls(0.0, 0.0, float(width), float(height))


BoxLike = BBox | Iterable[Point]


def as_bbox(box: BoxLike) -> BBox:
    """Normalize a BBox or a group of points into a BBox."""
    if isinstance(box, BBox):
        return box
    return BBox.from_points(box)
