from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request

_USER_KEY = "user"


def start_session(request: Request, user: dict[str, Any]) -> None:
    # A new login must not inherit the previous user's saved profile
    request.session.clear()
    request.session[_USER_KEY] = user


def end_session(request: Request) -> None:
    request.session.clear()


def require_user(request: Request) -> dict:
    """Raise 401 if no user is logged in."""
    user = request.session.get(_USER_KEY)
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_admin(request: Request) -> dict:
    """Raise 401 if not logged in, 403 if not admin."""
    user = require_user(request)
    if user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
