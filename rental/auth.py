"""Admin guard for the endpoints that edit the fleet or reservation statuses.

Each protected route declares the operation it performs::

    @app.post("/api/bicycles", dependencies=[Depends(require_admin("add bicycle"))])

so a rejected request is logged with the operation it tried.  Settings come
in through the ``get_settings`` dependency and can be overridden per app.

Behavior matrix:
  ADMIN_API_KEY set + valid token   → allow
  ADMIN_API_KEY set + wrong/missing → 401 Unauthorized
  ADMIN_API_KEY empty + DEBUG=true  → allow (local dev convenience)
  ADMIN_API_KEY empty + DEBUG=false → 403 Forbidden (locked in production)
"""

from __future__ import annotations

import logging
import secrets
from typing import Awaitable, Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from rental.config import Settings, get_settings

log = logging.getLogger("rental.auth")

_bearer_scheme = HTTPBearer(auto_error=False)


def check_admin_token(
    credentials: HTTPAuthorizationCredentials | None,
    config: Settings,
    operation: str,
) -> None:
    """Raise HTTPException unless ``credentials`` may perform ``operation``."""
    key = config.admin_api_key

    if not key:
        if config.debug:
            return
        log.warning("Rejected %s: admin API key not configured", operation)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Cannot {operation}: admin API key not configured. Set ADMIN_API_KEY in .env.",
        )

    if credentials is None or not secrets.compare_digest(credentials.credentials, key):
        log.warning(
            "Rejected %s: %s admin token",
            operation, "missing" if credentials is None else "invalid",
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Cannot {operation}: invalid or missing admin token.",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_admin(operation: str) -> Callable[..., Awaitable[None]]:
    """Build a FastAPI dependency guarding one admin operation."""

    async def guard(
        credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
        config: Settings = Depends(get_settings),
    ) -> None:
        check_admin_token(credentials, config, operation)

    return guard
