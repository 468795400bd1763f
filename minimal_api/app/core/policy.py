"""
Route authorization policy.

Access rules live in a single table, ``ROUTE_POLICIES``, keyed by HTTP
method and route path template.  ``enforce_policy`` is installed as an
application-wide dependency: for every matched route it looks up the
entry, authenticates the bearer token when the route is protected and
checks the ``role`` claim against the allowed roles.

Routes missing from the table are denied (authenticated callers get
403) so that a new route cannot become public by accident.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from minimal_api.app.models.administrator import Profile

from .security import ROLE_CLAIM, authenticate, bearer_scheme


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutePolicy:
    """Who may call a route.

    ``roles`` is ``None`` for anonymous routes; otherwise the caller
    must present a valid token whose role is in the set.
    """

    roles: Optional[FrozenSet[str]] = None

    @property
    def anonymous(self) -> bool:
        return self.roles is None


ANONYMOUS = RoutePolicy()
ADMIN_ONLY = RoutePolicy(frozenset({Profile.ADMIN.value}))
ADMIN_OR_EDITOR = RoutePolicy(frozenset({Profile.ADMIN.value, Profile.EDITOR.value}))
DENY = RoutePolicy(frozenset())

ROUTE_POLICIES: Dict[Tuple[str, str], RoutePolicy] = {
    ("GET", "/"): ANONYMOUS,
    ("POST", "/administrators/login"): ANONYMOUS,
    ("POST", "/administrators"): ADMIN_ONLY,
    ("GET", "/administrators"): ADMIN_ONLY,
    ("GET", "/administrator/{id}"): ADMIN_ONLY,
    ("DELETE", "/administrator/{id}"): ADMIN_ONLY,
    ("POST", "/vehicles"): ADMIN_OR_EDITOR,
    ("GET", "/vehicles"): ADMIN_OR_EDITOR,
    ("GET", "/vehicle/{id}"): ADMIN_OR_EDITOR,
    ("GET", "/vehiclesName/{name}"): ADMIN_OR_EDITOR,
    ("GET", "/vehiclesBrand/{brand}"): ADMIN_OR_EDITOR,
    ("PUT", "/vehicle/{id}"): ADMIN_ONLY,
    ("DELETE", "/vehicle/{id}"): ADMIN_ONLY,
}


def policy_for(method: str, path: str) -> RoutePolicy:
    """Return the policy for a route, ``DENY`` when it is not listed."""
    return ROUTE_POLICIES.get((method.upper(), path), DENY)


def enforce_policy(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> None:
    """Authenticate and authorize the current request.

    * Anonymous route: pass through.
    * Missing or invalid token: 401 (raised by ``authenticate``).
    * Role not allowed for the route: 403.
    """
    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    policy = policy_for(request.method, path)
    if policy.anonymous:
        return
    claims = authenticate(request, credentials)
    role = claims.get(ROLE_CLAIM)
    if role not in policy.roles:
        logger.warning(
            "Denied %s %s for %s with role %r",
            request.method,
            path,
            claims.get("email"),
            role,
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="insufficient_permissions")
