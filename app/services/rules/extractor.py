"""Usage: single entry point resolving any extraction rule against a document."""

from __future__ import annotations

from typing import assert_never

from app.schemas.document import Document, Line
from app.schemas.extraction import ExtractionConfig, LabelConfig, RowConfig
from app.services.rules.label_resolver import resolve_label
from app.services.rules.ranking import CANDIDATE_WINDOW
from app.services.rules.row_resolver import ROW_BAND_TOLERANCE, resolve_row


def extract(
    config: ExtractionConfig,
    document: Document,
    *,
    candidate_window: int = CANDIDATE_WINDOW,
    row_band: float = ROW_BAND_TOLERANCE,
) -> Line | None:
    """Resolve ``config`` against ``document``; ``None`` when nothing matches."""

    match config:
        case LabelConfig():
            return resolve_label(config, document, candidate_window=candidate_window)
        case RowConfig():
            return resolve_row(config, document, row_band=row_band)
        case _:
            assert_never(config)
