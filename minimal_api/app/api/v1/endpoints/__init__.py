"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (home, administrators,
vehicles).  The routers are aggregated in ``router.py``.  Access rules
are not declared here: they live in ``core.policy.ROUTE_POLICIES``.
"""
