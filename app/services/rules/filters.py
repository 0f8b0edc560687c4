"""Usage: select page lines lying in a given direction from an anchor line."""

from __future__ import annotations

from typing import Callable, assert_never

from app.schemas.document import Line, Page
from app.schemas.extraction import Direction
from app.services.rules.geometry import is_above, is_below, is_left_of, is_right_of


def filter_below(page: Page, anchor: Line) -> list[Line]:
    return _select(page, anchor, is_below)


def filter_above(page: Page, anchor: Line) -> list[Line]:
    return _select(page, anchor, is_above)


def filter_right(page: Page, anchor: Line) -> list[Line]:
    return _select(page, anchor, is_right_of)


def filter_left(page: Page, anchor: Line) -> list[Line]:
    return _select(page, anchor, is_left_of)


def filter_lines(page: Page, anchor: Line, direction: Direction) -> list[Line]:
    match direction:
        case "below":
            return filter_below(page, anchor)
        case "above":
            return filter_above(page, anchor)
        case "right":
            return filter_right(page, anchor)
        case "left":
            return filter_left(page, anchor)
        case _:
            assert_never(direction)


def _select(page: Page, anchor: Line, predicate: Callable[[Line, Line], bool]) -> list[Line]:
    # Boundaries are inclusive: a line touching the anchor edge qualifies.
    return [line for line in page.lines if predicate(line, anchor)]
