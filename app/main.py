"""FastAPI application factory: entry point for the product recommender."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.dependencies import get_catalog
from app.api.routes.catalog import router as catalog_router
from app.api.routes.recommendations import router as recommendations_router
from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    logger.info("Product recommender starting up...")
    logger.info("Catalog: %d products", len(get_catalog().list_items()))
    logger.info("LLM provider: %s", settings.llm_provider.value)
    logger.info("LLM timeout: %.1fs", settings.llm_timeout_seconds)
    logger.info("Max recommendations: %d", settings.max_recommendations)
    yield
    logger.info("Product recommender shutting down...")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="Product Recommender",
        description="Tag-overlap product recommendations with LLM explanations",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ─────────────────────────────────────
    application.include_router(catalog_router)
    application.include_router(recommendations_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "product-recommender"}

    return application


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
