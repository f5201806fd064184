"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new resources are introduced, include their routers
here.
"""

from fastapi import APIRouter

from .endpoints import commands

router = APIRouter()

router.include_router(commands.router, prefix="/commands", tags=["commands"])
