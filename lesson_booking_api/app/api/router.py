"""
Top‑level API router.

Aggregates the domain routers under their public prefixes.  The paths
are unversioned because the booking frontend calls them directly.
"""

from fastapi import APIRouter

from .endpoints import images, lessons, orders, search

router = APIRouter()

router.include_router(lessons.router, prefix="/lessons", tags=["lessons"])
router.include_router(search.router, prefix="/search", tags=["search"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(images.router, prefix="/images", tags=["images"])
