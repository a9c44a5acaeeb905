"""
User endpoints for API v1.

Users are opaque JSON objects.  ``POST`` stores one and echoes it,
``GET`` lists all of them in submission order.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from catalog_api.app.api.deps import get_user_service
from catalog_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    user: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Store a user and return it unchanged."""
    return service.append(user)


@router.get("")
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[Dict[str, Any]]:
    return service.list_all()
