"""Usage: run every rule of a named template against a document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from app.schemas.document import Document
from app.schemas.extraction import ExtractionTemplate
from app.services.rules.extractor import extract
from app.services.rules.ranking import CANDIDATE_WINDOW
from app.services.rules.row_resolver import ROW_BAND_TOLERANCE
from app.services.rules.template_loader import load_templates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateExtractionResult:
    complete: bool
    data: dict[str, str | None]
    template_name: str
    errors: list[str]


class TemplateRuleExtractor:
    def __init__(
        self,
        templates: Sequence[ExtractionTemplate] | None = None,
        *,
        candidate_window: int = CANDIDATE_WINDOW,
        row_band: float = ROW_BAND_TOLERANCE,
    ) -> None:
        source = load_templates() if templates is None else templates
        self._templates = {template.name: template for template in source}
        self._candidate_window = candidate_window
        self._row_band = row_band

    @property
    def template_names(self) -> list[str]:
        return list(self._templates)

    def get(self, name: str) -> ExtractionTemplate:
        try:
            return self._templates[name]
        except KeyError:
            raise KeyError(f"Unknown template: {name}") from None

    def extract(self, name: str, document: Document) -> TemplateExtractionResult:
        template = self.get(name)
        data: dict[str, str | None] = {}
        errors: list[str] = []

        for field in template.fields:
            line = extract(
                field.rule,
                document,
                candidate_window=self._candidate_window,
                row_band=self._row_band,
            )
            data[field.name] = line.text if line is not None else None
            if line is None:
                logger.debug("Template field missing: %s template=%s", field.name, name)
                if field.required:
                    errors.append(f"missing_required:{field.name}")

        if errors:
            logger.warning("Template extraction incomplete: template=%s errors=%s", name, errors)

        return TemplateExtractionResult(
            complete=not errors,
            data=data,
            template_name=name,
            errors=errors,
        )
