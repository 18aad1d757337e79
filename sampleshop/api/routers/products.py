# sampleshop/api/routers/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from sampleshop.api.deps import get_catalog_service
from sampleshop.domain.schemas import Product
from sampleshop.errors import UnknownProductError
from sampleshop.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[Product])
def list_products(
    type: Optional[str] = Query(None, description="Filter by product type"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.list_products(type)


@router.post("/refresh")
def refresh_products(catalog: CatalogService = Depends(get_catalog_service)):
    """Re-fetch the product sheet, the current list stays on failure."""
    return {"count": catalog.refresh()}


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    try:
        return catalog.get_product(product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
