"""Usage: anchor-relative line extraction rules."""

from app.services.rules.extractor import extract
from app.services.rules.template_extractor import TemplateExtractionResult, TemplateRuleExtractor

__all__ = ["extract", "TemplateExtractionResult", "TemplateRuleExtractor"]
