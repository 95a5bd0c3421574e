"""Admin gate for the write endpoints."""

from __future__ import annotations

import secrets

from fastapi import Header

from la_motors.domain.errors import UnauthorizedError
from la_motors.infra.config import admin_password


def require_admin(
    x_admin_password: str | None = Header(default=None, alias="X-Admin-Password"),
) -> None:
    """
    Reject the request unless X-Admin-Password matches ADMIN_PASSWORD.

    Raises:
        UnauthorizedError: Header missing or wrong
    """
    if not x_admin_password or not secrets.compare_digest(
        x_admin_password.encode(), admin_password().encode()
    ):
        raise UnauthorizedError("Admin password required")
