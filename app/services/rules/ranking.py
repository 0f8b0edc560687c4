"""Usage: order candidate lines by distance to an anchor coordinate."""

from __future__ import annotations

from typing import Sequence, assert_never

from app.schemas.document import Line
from app.schemas.extraction import Direction, HorizontalDirection
from app.services.rules.geometry import Edges, edges

CANDIDATE_WINDOW = 3


def sort_left(lines: Sequence[Line], target_x: float) -> list[Line]:
    """Order lines by how close their right edge is to ``target_x``."""

    return sorted(lines, key=lambda line: abs(edges(line).right - target_x))


def sort_right(lines: Sequence[Line], target_x: float) -> list[Line]:
    """Order lines by how close their left edge is to ``target_x``."""

    return sorted(lines, key=lambda line: abs(edges(line).left - target_x))


def sort_by_alignment(
    lines: Sequence[Line],
    alignment: HorizontalDirection,
    target_x: float,
) -> list[Line]:
    match alignment:
        case "left":
            return sort_left(lines, target_x)
        case "right":
            return sort_right(lines, target_x)
        case _:
            assert_never(alignment)


def nearest_in_direction(
    lines: Sequence[Line],
    anchor: Edges,
    direction: Direction,
    anchor_x: float,
    *,
    limit: int = CANDIDATE_WINDOW,
) -> list[Line]:
    """Keep the ``limit`` lines closest to the anchor along ``direction``.

    Vertical directions measure from the facing anchor edge; horizontal ones
    measure from ``anchor_x``. Equal distances keep their page order.
    """

    match direction:
        case "above":
            ranked = sorted(lines, key=lambda line: abs(edges(line).bottom - anchor.top))
        case "below":
            ranked = sorted(lines, key=lambda line: abs(edges(line).top - anchor.bottom))
        case "right":
            ranked = sorted(lines, key=lambda line: abs(edges(line).left - anchor_x))
        case "left":
            ranked = sorted(lines, key=lambda line: abs(edges(line).right - anchor_x))
        case _:
            assert_never(direction)
    return ranked[:limit]
