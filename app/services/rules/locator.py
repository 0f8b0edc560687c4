"""Usage: find the anchor line a rule is positioned against."""

from __future__ import annotations

from app.schemas.document import AnchorReference, Document


def find_anchor(
    document: Document,
    anchor_text: str,
    *,
    case_sensitive: bool = True,
) -> AnchorReference | None:
    """Return the first line whose text equals ``anchor_text``.

    Pages are scanned in order, then lines within each page, so a repeated
    anchor always resolves to its earliest occurrence.
    """

    target = anchor_text if case_sensitive else anchor_text.casefold()
    for page_index, page in enumerate(document.pages):
        for line in page.lines:
            text = line.text if case_sensitive else line.text.casefold()
            if text == target:
                return AnchorReference(page_index=page_index, line=line)
    return None
