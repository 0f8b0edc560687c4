from fastapi import APIRouter, HTTPException, status

from app.api.deps import TemplateExtractorDep
from app.schemas.document import Document
from app.schemas.extraction import TemplateExtractionResponse

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", summary="List extraction templates", response_model=list[str])
async def list_templates(extractor: TemplateExtractorDep) -> list[str]:
    return extractor.template_names

@router.post(
    "/{name}/extract",
    summary="Extract every field of a template",
    response_model=TemplateExtractionResponse,
)
async def extract_template(
    name: str,
    document: Document,
    extractor: TemplateExtractorDep,
) -> TemplateExtractionResponse:
    """Run all rules of the named template against a standardized document."""

    try:
        result = extractor.extract(name, document)
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown template: {name}",
        ) from exc

    return TemplateExtractionResponse(
        success=result.complete,
        template_name=result.template_name,
        data=result.data,
        errors=result.errors,
        message="ok" if result.complete else "Template extraction incomplete.",
    )
