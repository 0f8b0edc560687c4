"""Usage: edge coordinates and directional predicates for line rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from app.schemas.document import Line


@dataclass(frozen=True)
class Edges:
    left: float
    right: float
    top: float
    bottom: float

    @property
    def y_center(self) -> float:
        return (self.top + self.bottom) / 2


def edges(line: Line) -> Edges:
    xs = [point.x for point in line.bounding_polygon]
    ys = [point.y for point in line.bounding_polygon]
    return Edges(left=min(xs), right=max(xs), top=min(ys), bottom=max(ys))


def is_below(line: Line, anchor: Line) -> bool:
    return edges(line).top >= edges(anchor).bottom


def is_above(line: Line, anchor: Line) -> bool:
    return edges(line).bottom <= edges(anchor).top


def is_right_of(line: Line, anchor: Line) -> bool:
    return edges(line).left >= edges(anchor).right


def is_left_of(line: Line, anchor: Line) -> bool:
    return edges(line).right <= edges(anchor).left
