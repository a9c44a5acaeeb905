"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under their path
prefixes.  When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import products, users

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(users.router, prefix="/users", tags=["users"])
