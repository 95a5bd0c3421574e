"""Environment-driven settings for the record store, object store and admin gate."""

from __future__ import annotations

import os
from pathlib import Path

VEHICLE_STORAGE_BUCKET = "la-motors-inventory"

DEFAULT_STORAGE_ROOT = "./storage"
DEFAULT_PUBLIC_BASE_URL = "http://localhost:8000"


def _required(name: str) -> str:
    value = os.getenv(name)

    if not value:
        raise RuntimeError(f"{name} environment variable is not set")

    return value


def database_url() -> str:
    return _required("DATABASE_URL")


def db_pool_size() -> int:
    return int(os.getenv("DB_POOL_SIZE", "10"))


def db_max_overflow() -> int:
    return int(os.getenv("DB_MAX_OVERFLOW", "20"))


def storage_root() -> Path:
    """Directory that holds one sub-directory per bucket."""
    return Path(os.getenv("STORAGE_ROOT") or DEFAULT_STORAGE_ROOT)


def storage_public_base_url() -> str:
    return (os.getenv("STORAGE_PUBLIC_BASE_URL") or DEFAULT_PUBLIC_BASE_URL).rstrip("/")


def admin_password() -> str:
    return _required("ADMIN_PASSWORD")
