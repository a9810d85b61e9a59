"""
Top-level router for version 1 of the API.

This router aggregates the form and health routers under a unified
prefix.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import form, health

router = APIRouter()

router.include_router(form.router, prefix="/form", tags=["form"])
router.include_router(health.router, prefix="/health", tags=["health"])
