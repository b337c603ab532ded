"""
Pho Huong Viet Order API — Menu endpoint
"""
from fastapi import APIRouter, Depends

from restaurant_api.schemas.menu import MenuResponse
from restaurant_api.services.catalog import MenuCatalog, get_catalog

router = APIRouter(prefix="/api", tags=["menu"])


@router.get("/menu", response_model=MenuResponse)
async def get_menu(catalog: MenuCatalog = Depends(get_catalog)):
    """Full menu, both grouped by category (catalog order) and as a flat list."""
    return MenuResponse(menu=catalog.by_category(), items=list(catalog.items))
