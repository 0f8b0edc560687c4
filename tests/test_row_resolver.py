from __future__ import annotations

from pathlib import Path

import pytest

from app.schemas.document import Document, Line, Page, Point
from app.schemas.extraction import RowConfig
from app.services.rules.extractor import extract
from app.services.rules.row_resolver import pick_by_tiebreaker, resolve_row

DATA_DIR = Path(__file__).parent / "data"


def _document() -> Document:
    return Document.model_validate_json((DATA_DIR / "standardized_text.json").read_text(encoding="utf-8"))


def _line(text: str, x1: float, y1: float, x2: float, y2: float) -> Line:
    return Line(
        text=text,
        bounding_polygon=(Point(x=x1, y=y1), Point(x=x2, y=y1), Point(x=x2, y=y2), Point(x=x1, y=y2)),
    )


@pytest.mark.parametrize(
    ("tiebreaker", "expected"),
    [
        (1, "$1770.00"),
        (2, "$0.00"),
        (3, "$1770.00 USD"),
        ("last", "$1770.00 USD"),
    ],
)
def test_row_right_uses_tiebreaker_in_reading_order(tiebreaker: int | str, expected: str) -> None:
    config = RowConfig(position="right", tiebreaker=tiebreaker, anchor="Line Haul")

    result = resolve_row(config, _document())

    assert result is not None
    assert result.text == expected


def test_row_left_last_picks_final_candidate() -> None:
    config = RowConfig(position="left", tiebreaker="last", anchor="$1770.00 USD")

    result = extract(config, _document())

    assert result is not None
    assert result.text == "$0.00"


def test_row_returns_none_when_anchor_missing() -> None:
    config = RowConfig(position="left", tiebreaker="last", anchor="Nonexistent")

    assert resolve_row(config, _document()) is None


def test_row_returns_none_when_nothing_beside_anchor() -> None:
    config = RowConfig(position="left", tiebreaker=1, anchor="Attention")

    assert resolve_row(config, _document()) is None


def test_row_single_candidate_skips_band_and_tiebreaker() -> None:
    document = Document(
        pages=[
            Page(
                lines=[
                    _line("Rate", 1.0, 1.0, 2.0, 1.2),
                    _line("$250.00", 4.0, 3.0, 5.0, 3.2),
                ]
            )
        ]
    )
    config = RowConfig(position="right", tiebreaker=5, anchor="Rate")

    result = resolve_row(config, document)

    assert result is not None
    assert result.text == "$250.00"


def test_row_returns_none_when_no_candidate_on_anchor_row() -> None:
    document = Document(
        pages=[
            Page(
                lines=[
                    _line("Rate", 1.0, 1.0, 2.0, 1.2),
                    _line("above", 3.0, 0.5, 4.0, 0.7),
                    _line("below", 3.0, 2.0, 4.0, 2.2),
                ]
            )
        ]
    )
    config = RowConfig(position="right", tiebreaker=1, anchor="Rate")

    assert resolve_row(config, document) is None


def test_row_out_of_range_tiebreaker_returns_none() -> None:
    document = Document(
        pages=[
            Page(
                lines=[
                    _line("Rate", 1.0, 1.0, 2.0, 1.2),
                    _line("$10.00", 3.0, 1.0, 4.0, 1.2),
                    _line("$20.00", 5.0, 1.01, 6.0, 1.21),
                ]
            )
        ]
    )

    assert resolve_row(RowConfig(position="right", tiebreaker=5, anchor="Rate"), document) is None
    result = resolve_row(RowConfig(position="right", tiebreaker=2, anchor="Rate"), document)
    assert result is not None
    assert result.text == "$20.00"


def test_row_band_is_configurable() -> None:
    document = Document(
        pages=[
            Page(
                lines=[
                    _line("Rate", 1.0, 1.0, 2.0, 1.2),
                    _line("$10.00", 3.0, 1.08, 4.0, 1.28),
                    _line("$20.00", 5.0, 3.0, 6.0, 3.2),
                ]
            )
        ]
    )
    config = RowConfig(position="right", tiebreaker=1, anchor="Rate")

    assert resolve_row(config, document) is None
    result = resolve_row(config, document, row_band=0.1)
    assert result is not None
    assert result.text == "$10.00"


def test_pick_by_tiebreaker() -> None:
    lines = [_line(text, 0.0, 0.0, 1.0, 1.0) for text in ("a", "b", "c")]

    assert pick_by_tiebreaker(lines, 1).text == "a"
    assert pick_by_tiebreaker(lines, "last").text == "c"
    assert pick_by_tiebreaker(lines, 4) is None
    assert pick_by_tiebreaker([], "last") is None
