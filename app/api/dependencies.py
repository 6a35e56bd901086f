"""FastAPI dependency providers for the catalog and explanation service."""

from functools import lru_cache

from fastapi import Depends

from app.adapters.catalog.static import DEFAULT_PRODUCTS, StaticCatalogAdapter, load_catalog_file
from app.adapters.llm.factory import build_llm_adapter
from app.config import settings
from app.ports.catalog import CatalogPort
from app.ports.llm import LLMPort
from app.services.explainer import ExplainerService


@lru_cache
def get_catalog() -> CatalogPort:
    """Build the process-wide read-only catalog once."""
    if settings.catalog_path:
        return StaticCatalogAdapter(load_catalog_file(settings.catalog_path))
    return StaticCatalogAdapter(DEFAULT_PRODUCTS)


@lru_cache
def get_llm() -> LLMPort:
    return build_llm_adapter(settings)


def get_explainer(llm: LLMPort = Depends(get_llm)) -> ExplainerService:
    return ExplainerService(llm)
