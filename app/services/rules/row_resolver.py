"""Usage: resolve row rules (same visual row as the anchor) to a single line."""

from __future__ import annotations

import logging
from typing import Sequence

from app.schemas.document import Document, Line
from app.schemas.extraction import RowConfig, Tiebreaker
from app.services.rules.filters import filter_lines
from app.services.rules.geometry import edges
from app.services.rules.locator import find_anchor

logger = logging.getLogger(__name__)

ROW_BAND_TOLERANCE = 0.05


def resolve_row(
    config: RowConfig,
    document: Document,
    *,
    row_band: float = ROW_BAND_TOLERANCE,
) -> Line | None:
    anchor_ref = find_anchor(document, config.anchor, case_sensitive=config.case_sensitive)
    if anchor_ref is None:
        logger.info("Anchor extraction failed: anchor_not_found anchor=%r", config.anchor)
        return None

    page = document.pages[anchor_ref.page_index]
    candidates = filter_lines(page, anchor_ref.line, config.position)
    if not candidates:
        logger.info(
            "Anchor extraction failed: no_candidates anchor=%r position=%s",
            config.anchor,
            config.position,
        )
        return None
    if len(candidates) == 1:
        return candidates[0]

    anchor_center = edges(anchor_ref.line).y_center
    same_row = [line for line in candidates if abs(edges(line).y_center - anchor_center) < row_band]
    logger.debug("Row candidates anchor=%r: %s", config.anchor, [line.text for line in same_row])

    if not same_row:
        logger.info("Anchor extraction failed: no_row_match anchor=%r", config.anchor)
        return None
    if len(same_row) == 1:
        return same_row[0]

    chosen = pick_by_tiebreaker(same_row, config.tiebreaker)
    if chosen is None:
        logger.info(
            "Anchor extraction failed: tiebreaker_out_of_range anchor=%r tiebreaker=%s candidates=%d",
            config.anchor,
            config.tiebreaker,
            len(same_row),
        )
    return chosen


def pick_by_tiebreaker(lines: Sequence[Line], tiebreaker: Tiebreaker) -> Line | None:
    """Select from ``lines`` in reading order; positions are 1-based."""

    if not lines:
        return None
    if tiebreaker == "last":
        return lines[-1]
    if tiebreaker < 1 or tiebreaker > len(lines):
        return None
    return lines[tiebreaker - 1]
