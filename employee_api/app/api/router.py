"""
Top‑level API router.

This router aggregates domain‑specific routers under a unified
prefix (``settings.api_prefix``, ``/api`` by default).
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
