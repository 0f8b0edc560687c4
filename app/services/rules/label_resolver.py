"""Usage: resolve label rules (direction plus edge alignment) to a single line."""

from __future__ import annotations

import logging

from app.schemas.document import Document, Line
from app.schemas.extraction import LabelConfig
from app.services.rules.filters import filter_lines
from app.services.rules.geometry import edges
from app.services.rules.locator import find_anchor
from app.services.rules.ranking import CANDIDATE_WINDOW, nearest_in_direction, sort_by_alignment

logger = logging.getLogger(__name__)


def resolve_label(
    config: LabelConfig,
    document: Document,
    *,
    candidate_window: int = CANDIDATE_WINDOW,
) -> Line | None:
    """Pick the line nearest the anchor in ``config.position``.

    The closest ``candidate_window`` lines along the search direction are
    kept, then the one best aligned with the anchor edge named by
    ``config.text_alignment`` wins.
    """

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
    logger.debug("Label candidates anchor=%r: %s", config.anchor, [line.text for line in candidates])

    anchor_edges = edges(anchor_ref.line)
    anchor_x = anchor_edges.left if config.text_alignment == "left" else anchor_edges.right

    nearest = nearest_in_direction(
        candidates,
        anchor_edges,
        config.position,
        anchor_x,
        limit=candidate_window,
    )
    ranked = sort_by_alignment(nearest, config.text_alignment, anchor_x)
    logger.debug("Label ranked anchor=%r: %s", config.anchor, [line.text for line in ranked])
    return ranked[0]
