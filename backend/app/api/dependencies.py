"""
Shared API dependencies.

Bearer-token authentication, role checks, and the mapping from service
errors to HTTP responses, so route modules can stay thin and consistent.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    SofiError,
    TokenError,
    ValidationError,
)
from app.models.user_model import Role
from app.services import auth_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def to_http(exc: SofiError) -> HTTPException:
    """Translate a service-layer error into the matching HTTPException."""
    if isinstance(exc, (InvalidCredentialsError, TokenError)):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc), headers=UNAUTHORIZED_HEADERS)
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=UNAUTHORIZED_HEADERS,
        )
    try:
        return auth_service.resolve_token(credentials.credentials)
    except TokenError as e:
        raise to_http(e)


def require_roles(*roles: Role) -> Callable:
    """Dependency factory: allow the request only for the given roles."""
    allowed = {r.value for r in roles}

    async def _check(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if user["role"] not in allowed:
            logger.warning("User %s (%s) denied; requires one of %s", user["email"], user["role"], sorted(allowed))
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role.")
        return user

    return _check


# ── Role groups ───────────────────────────────────────────────────────────────
fund_writers = require_roles(Role.ADMIN, Role.MANAGER)
admins_only = require_roles(Role.ADMIN)
report_readers = require_roles(Role.ADMIN, Role.MANAGER, Role.ANALYST)
portfolio_writers = require_roles(Role.ADMIN, Role.MANAGER, Role.ANALYST)
