"""
Bearer token issuance and verification.

``TokenService`` signs access tokens with HMAC-SHA256 using PyJWT.  A
token embeds the administrator's email, their profile and a ``role``
claim that the authorization policy matches against.  Tokens expire a
fixed time after issuance (24 hours by default).

The service is built from ``Settings`` once, in ``create_app``, and
stored on ``app.state.token_service``.  Construction fails with
``ConfigurationError`` when no signing secret is configured.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings


logger = logging.getLogger(__name__)

ROLE_CLAIM = "role"


class TokenService:
    """Issue and validate signed bearer tokens."""

    def __init__(self, settings: Settings) -> None:
        self._secret = settings.require_jwt_secret()
        self._algorithm = settings.jwt_algorithm
        self._lifetime = timedelta(minutes=settings.access_token_expire_minutes)

    def issue(self, administrator: Any, now: Optional[datetime] = None) -> str:
        """Create a signed token for ``administrator``.

        Parameters
        ----------
        administrator
            Any object with ``email`` and ``profile`` attributes.
        now : Optional[datetime]
            Issuance time; defaults to the current UTC time.

        Returns
        -------
        str
            The encoded JWT.
        """
        issued_at = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "email": administrator.email,
            "profile": administrator.profile,
            ROLE_CLAIM: administrator.profile,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the claims.

        Raises ``jwt.ExpiredSignatureError`` for expired tokens and
        ``jwt.InvalidTokenError`` for anything else that fails to verify.
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self._algorithm],
            options={"require": ["exp", ROLE_CLAIM]},
        )


bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Dict[str, Any]:
    """Validate the bearer token of ``request`` and return its claims.

    Raises an HTTP 401 error when the header is missing or the token is
    invalid or expired.  On success the claims are also stored on
    ``request.state.claims`` for handlers that need the caller identity.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("missing_token")
    token_service: TokenService = request.app.state.token_service
    try:
        claims = token_service.validate(credentials.credentials)
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected expired token on %s %s", request.method, request.url.path)
        raise _unauthorized("token_expired")
    except jwt.InvalidTokenError:
        logger.warning("Rejected invalid token on %s %s", request.method, request.url.path)
        raise _unauthorized("token_invalid")
    request.state.claims = claims
    return claims


def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """Dependency returning the caller's token claims.

    Reuses the claims already validated by the policy interceptor when
    present, so the token is decoded once per request.
    """
    claims = getattr(request.state, "claims", None)
    if claims is not None:
        return claims
    return authenticate(request, credentials)
