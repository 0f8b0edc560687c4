import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.api.routes.extract import router as extract_router
from app.api.routes.health import router as health_router
from app.api.routes.templates import router as templates_router
from app.core.config import settings
from app.services.rules.template_extractor import TemplateRuleExtractor
from app.services.rules.template_loader import load_templates
from app.state import global_state

from app.core.logging import setup_logging

# Configure logging before the app is created.
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Doc Anchor Service...")

    logger.info("Loading extraction templates from %s", settings.template_dir)
    global_state.template_extractor = TemplateRuleExtractor(
        load_templates(settings.template_dir),
        candidate_window=settings.candidate_window,
        row_band=settings.row_band_tolerance,
    )
    logger.info("Loaded %d template(s)", len(global_state.template_extractor.template_names))

    logger.info("System ready!")
    yield
    logger.info("Shutting down service...")
    global_state.template_extractor = None


app = FastAPI(title="Doc Anchor Service", lifespan=lifespan)

app.include_router(health_router, prefix="/api")
app.include_router(extract_router, prefix="/api")
app.include_router(templates_router, prefix="/api")
