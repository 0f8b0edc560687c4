import logging

from fastapi import APIRouter

from app.core.config import settings
from app.schemas.extraction import ExtractionRequest, ExtractionResponse
from app.services.rules.extractor import extract

router = APIRouter(tags=["extract"])

logger = logging.getLogger(__name__)


@router.post(
    "/extract",
    summary="Resolve one anchor rule",
    response_model=ExtractionResponse,
)
async def extract_line(request: ExtractionRequest) -> ExtractionResponse:
    """Locate the line a single label or row rule points at."""

    logger.debug("Extract request kind=%s anchor=%r", request.config.kind, request.config.anchor)

    line = extract(
        request.config,
        request.document,
        candidate_window=settings.candidate_window,
        row_band=settings.row_band_tolerance,
    )
    if line is None:
        return ExtractionResponse(success=False, line=None, message="not found")
    return ExtractionResponse(success=True, line=line, message="ok")
