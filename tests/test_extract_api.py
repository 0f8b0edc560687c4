from __future__ import annotations

import json
from pathlib import Path
from typing import Any, AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_template_extractor
from app.main import app
from app.services.rules.template_extractor import TemplateRuleExtractor

DATA_DIR = Path(__file__).parent / "data"


def _document_payload() -> dict[str, Any]:
    return json.loads((DATA_DIR / "standardized_text.json").read_text(encoding="utf-8"))


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_template_extractor] = lambda: TemplateRuleExtractor()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_extract_label_rule(client: AsyncClient) -> None:
    payload = {
        "config": {"kind": "label", "position": "below", "textAlignment": "left", "anchor": "Distance"},
        "document": _document_payload(),
    }

    response = await client.post("/api/extract", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["line"]["text"] == "733mi"
    assert len(body["line"]["boundingPolygon"]) == 4


@pytest.mark.asyncio
async def test_extract_row_rule(client: AsyncClient) -> None:
    payload = {
        "config": {"id": "row", "position": "right", "tiebreaker": 1, "anchor": "Line Haul"},
        "document": _document_payload(),
    }

    response = await client.post("/api/extract", json=payload)

    assert response.status_code == 200
    assert response.json()["line"]["text"] == "$1770.00"


@pytest.mark.asyncio
async def test_extract_reports_not_found(client: AsyncClient) -> None:
    payload = {
        "config": {"kind": "row", "position": "left", "tiebreaker": "last", "anchor": "Nonexistent"},
        "document": _document_payload(),
    }

    response = await client.post("/api/extract", json=payload)

    assert response.status_code == 200
    assert response.json() == {"success": False, "line": None, "message": "not found"}


@pytest.mark.asyncio
async def test_extract_rejects_malformed_polygon(client: AsyncClient) -> None:
    document = {"pages": [{"lines": [{"text": "x", "boundingPolygon": [{"x": 0, "y": 0}]}]}]}
    payload = {
        "config": {"kind": "label", "position": "below", "textAlignment": "left", "anchor": "x"},
        "document": document,
    }

    response = await client.post("/api/extract", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_templates(client: AsyncClient) -> None:
    response = await client.get("/api/templates")

    assert response.status_code == 200
    assert "freight_invoice" in response.json()


@pytest.mark.asyncio
async def test_template_extract(client: AsyncClient) -> None:
    response = await client.post("/api/templates/freight_invoice/extract", json=_document_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["distance"] == "733mi"
    assert body["data"]["line_haul"] == "$1770.00"


@pytest.mark.asyncio
async def test_template_extract_unknown_name(client: AsyncClient) -> None:
    response = await client.post("/api/templates/unknown/extract", json=_document_payload())

    assert response.status_code == 404
