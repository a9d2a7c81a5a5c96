from __future__ import annotations

import os
from typing import Any

import bcrypt

_users: dict[str, dict[str, Any]] = {}

# username -> (password env var, fallback password, role)
_DEMO_ACCOUNTS = {
    "user": ("DISHMATCH_USER_PASSWORD", "user123", "user"),
    "admin": ("DISHMATCH_ADMIN_PASSWORD", "admin123", "admin"),
}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def add_user(username: str, password: str, role: str = "user") -> None:
    _users[username] = {"password_hash": _hash_password(password), "role": role}


def _seed_users() -> None:
    """Register the demo accounts, passwords overridable from the environment."""
    for username, (env_var, fallback, role) in _DEMO_ACCOUNTS.items():
        add_user(username, os.environ.get(env_var, fallback), role)


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{username, role}`` or ``None``."""
    record = _users.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return {"username": username, "role": record["role"]}
    return None


_seed_users()
