"""Usage: load documents, extraction rules and rule templates from JSON files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from app.schemas.document import Document
from app.schemas.extraction import ExtractionConfig, ExtractionTemplate


TEMPLATE_DIR = Path(__file__).resolve().parents[2] / "extraction_templates"

_CONFIG_ADAPTER: TypeAdapter[ExtractionConfig] = TypeAdapter(ExtractionConfig)


def parse_config(data: Any) -> ExtractionConfig:
    return _CONFIG_ADAPTER.validate_python(data)


def load_config(path: Path | str) -> ExtractionConfig:
    return parse_config(_read_json(Path(path)))


def load_document(path: Path | str) -> Document:
    return Document.model_validate(_read_json(Path(path)))


@lru_cache(maxsize=4)
def load_templates(template_dir: Path | None = None) -> list[ExtractionTemplate]:
    target_dir = template_dir or TEMPLATE_DIR
    if not target_dir.exists():
        return []

    templates: list[ExtractionTemplate] = []
    seen: set[str] = set()
    for path in sorted(target_dir.glob("*.json")):
        template = _load_template(path)
        if template.name in seen:
            raise ValueError(f"Template {path} duplicates template name: {template.name}")
        seen.add(template.name)
        templates.append(template)
    return templates


def _load_template(path: Path) -> ExtractionTemplate:
    data = _read_json(path)
    required_keys = ("name", "fields")
    for key in required_keys:
        if key not in data:
            raise ValueError(f"Template {path} missing required key: {key}")
    try:
        return ExtractionTemplate.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Template {path} is invalid: {exc}") from exc


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))
