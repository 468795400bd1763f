"""
Top-level router for version 1 of the API.

Aggregates the domain routers.  When a route is added here its access
rule must also be added to ``core.policy.ROUTE_POLICIES``; unlisted
routes are denied.
"""

from fastapi import APIRouter

from .endpoints import administrators, home, vehicles

router = APIRouter()

router.include_router(home.router, tags=["Home"])
router.include_router(administrators.router, tags=["Administrators"])
router.include_router(vehicles.router, tags=["Vehicles"])
