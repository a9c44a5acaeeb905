"""
Dependency providers for API handlers.

The stores are created by ``create_app`` and attached to
``app.state``.  Handlers obtain them through these providers instead
of importing module level instances, so every application object has
its own isolated records.
"""

from fastapi import Request

from catalog_api.app.services.product_service import ProductService
from catalog_api.app.services.user_service import UserService


def get_product_service(request: Request) -> ProductService:
    """Return the products store of the application serving ``request``."""
    return request.app.state.product_service


def get_user_service(request: Request) -> UserService:
    """Return the users store of the application serving ``request``."""
    return request.app.state.user_service
