"""Catalog browsing routes."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog
from app.api.schemas import ProductResponse
from app.ports.catalog import CatalogPort

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    catalog: CatalogPort = Depends(get_catalog),
) -> list[ProductResponse]:
    """List every product in catalog order."""
    return [ProductResponse.from_item(item) for item in catalog.list_items()]
