from typing import Annotated
from fastapi import Depends, HTTPException
from app.services.rules.template_extractor import TemplateRuleExtractor
from app.state import global_state


async def get_template_extractor() -> TemplateRuleExtractor:
    if not global_state.template_extractor:
        raise HTTPException(status_code=503, detail="Template registry not initialized")
    return global_state.template_extractor


TemplateExtractorDep = Annotated[TemplateRuleExtractor, Depends(get_template_extractor)]
