"""
FastAPI application.

Builds the Adaptive Coach app and mounts the v1 API under ``/api/v1``.
"""

import logging

from fastapi import FastAPI

from app.adaptive.exercise_catalog import EXERCISE_CATALOG
from app.adaptive.periodization import LONG_TERM_PLANS, MESOCYCLE_STRUCTURES, TRAINING_BLOCKS
from app.adaptive.techniques import TECHNIQUE_CATALOG
from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Fatigue modelling, load recommendations and periodization planning.",
)

app.include_router(api_router, prefix="/api/v1")
logger.info("%s %s ready", settings.PROJECT_NAME, settings.VERSION)


@app.get("/")
async def root():
    return {"message": "Adaptive Coach API", "version": settings.VERSION, "docs": app.docs_url}


@app.get("/health")
async def health_check():
    """Liveness probe; does not touch the database."""
    return {"status": "healthy", "service": "adaptive-coach-api", "version": settings.VERSION}


@app.get("/info")
async def info():
    """Sizes of the built-in catalogs."""
    return {
        "project_name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "catalogs": {
            "exercises": len(EXERCISE_CATALOG),
            "techniques": len(TECHNIQUE_CATALOG),
            "mesocycles": len(MESOCYCLE_STRUCTURES),
            "training_blocks": len(TRAINING_BLOCKS),
            "long_term_plans": len(LONG_TERM_PLANS),
        },
    }
