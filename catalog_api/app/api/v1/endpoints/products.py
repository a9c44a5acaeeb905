"""
Product endpoints for API v1.

``POST`` stores the submitted JSON object as is and echoes it back;
``GET`` returns every stored product in submission order.  Products
have no identifier, so there is no lookup, update or delete.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from catalog_api.app.api.deps import get_product_service
from catalog_api.app.services.product_service import ProductService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    product: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Store a product and return it unchanged."""
    return service.append(product)


@router.get("")
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> List[Dict[str, Any]]:
    """Return all products in the order they were submitted."""
    return service.list_all()
