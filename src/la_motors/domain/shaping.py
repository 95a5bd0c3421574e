"""
Validation and payload shaping for vehicle writes.

Shaping turns a VehicleDraft or VehiclePatch into the column payload sent to
the record store:

- create: strings trimmed, empty optional fields dropped so the store applies
  its own defaults, blank image/feature entries removed, VIN generated when
  missing
- update: only mentioned fields are written, an empty optional field is
  written as an explicit None to clear the column
"""

from __future__ import annotations

import secrets
import string
import time
from datetime import date
from enum import StrEnum
from typing import Any, Iterable

from la_motors.domain.errors import ValidationError
from la_motors.domain.vehicle import (
    Drivetrain,
    FuelType,
    Transmission,
    VehicleDraft,
    VehiclePatch,
    VehicleStatus,
)

MIN_YEAR = 1900
SEATING_RANGE = (1, 8)
DOORS_RANGE = (2, 5)

OPTIONAL_TEXT_FIELDS = (
    "exterior_color",
    "interior_color",
    "engine",
    "body_style",
    "description",
)
ENUM_FIELDS: dict[str, type[StrEnum]] = {
    "fuel_type": FuelType,
    "transmission": Transmission,
    "drivetrain": Drivetrain,
}
LIST_FIELDS = ("images", "features")

_VIN_ALPHABET = string.digits + string.ascii_uppercase


def generate_vin(now_ms: int | None = None) -> str:
    """Synthetic VIN: AUTO + epoch milliseconds + 6 random base36 characters."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_VIN_ALPHABET) for _ in range(6))
    return f"AUTO{now_ms}{suffix}"


def clean_entries(values: Iterable[str] | None) -> list[str]:
    """Strip entries and drop blank ones, keeping order."""
    if not values:
        return []
    return [value.strip() for value in values if value and value.strip()]


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _is_empty_number(value: int | None) -> bool:
    # 0 seats / 0 doors is the form's "not filled in"
    return value is None or value == 0


class _ErrorCollector:
    """Accumulates field errors so a single ValidationError reports all of them."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def add(self, field: str, message: str, code: str) -> None:
        self.errors.append({"field": field, "message": message, "code": code})

    def errors_for(self, field: str) -> list[dict[str, str]]:
        return [error for error in self.errors if error["field"] == field]

    def raise_if_any(self) -> None:
        if self.errors:
            raise ValidationError(errors=self.errors)

    def required_text(self, field: str, value: str | None) -> str | None:
        cleaned = _clean_text(value)
        if cleaned is None:
            self.add(field, "Must not be empty", "REQUIRED")
        return cleaned

    def price(self, value: int | None) -> None:
        if value is None:
            self.add("price", "Is required", "REQUIRED")
        elif value <= 0:
            self.add("price", "Must be greater than 0", "OUT_OF_RANGE")

    def year(self, value: int | None, current_year: int) -> None:
        if value is None:
            self.add("year", "Is required", "REQUIRED")
        elif not MIN_YEAR <= value <= current_year + 1:
            self.add(
                "year",
                f"Must be between {MIN_YEAR} and {current_year + 1}",
                "OUT_OF_RANGE",
            )

    def mileage(self, value: int | None) -> None:
        if value is not None and value < 0:
            self.add("mileage", "Must be >= 0", "OUT_OF_RANGE")

    def bounded(self, field: str, value: int | None, bounds: tuple[int, int]) -> None:
        low, high = bounds
        if not _is_empty_number(value) and not low <= value <= high:  # type: ignore[operator]
            self.add(field, f"Must be between {low} and {high}", "OUT_OF_RANGE")

    def enum(self, field: str, enum_cls: type[StrEnum], value: str | None) -> StrEnum | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            return enum_cls(value.strip() if isinstance(value, str) else value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            self.add(field, f"Must be one of: {allowed}", "INVALID_CHOICE")
            return None


def _current_year(current_year: int | None) -> int:
    return current_year if current_year is not None else date.today().year


def shape_create_payload(
    draft: VehicleDraft, current_year: int | None = None
) -> dict[str, Any]:
    """
    Validate a draft and build the insert payload.

    Args:
        draft: Candidate record
        current_year: Override for the upper year bound (defaults to today)

    Returns:
        Column payload with optional empty fields omitted

    Raises:
        ValidationError: With one entry per violated field
    """
    year_limit = _current_year(current_year)
    collector = _ErrorCollector()

    make = collector.required_text("make", draft.make)
    model = collector.required_text("model", draft.model)
    collector.price(draft.price)
    collector.year(draft.year, year_limit)
    collector.mileage(draft.mileage)
    collector.bounded("seating", draft.seating, SEATING_RANGE)
    collector.bounded("doors", draft.doors, DOORS_RANGE)

    enums = {
        name: collector.enum(name, cls, getattr(draft, name))
        for name, cls in ENUM_FIELDS.items()
    }
    status = collector.enum("status", VehicleStatus, draft.status) or VehicleStatus.AVAILABLE

    collector.raise_if_any()

    payload: dict[str, Any] = {
        "make": make,
        "model": model,
        "year": draft.year,
        "price": draft.price,
        "mileage": draft.mileage or 0,
        "status": status.value,
        "images": clean_entries(draft.images),
    }

    for name, member in enums.items():
        if member is not None:
            payload[name] = member.value

    for name in OPTIONAL_TEXT_FIELDS:
        cleaned = _clean_text(getattr(draft, name))
        if cleaned is not None:
            payload[name] = cleaned

    for name in ("seating", "doors"):
        value = getattr(draft, name)
        if not _is_empty_number(value):
            payload[name] = value

    features = clean_entries(draft.features)
    if features:
        payload["features"] = features

    payload["vin"] = _clean_text(draft.vin) or generate_vin()

    return payload


def shape_update_payload(
    patch: VehiclePatch, current_year: int | None = None
) -> dict[str, Any]:
    """
    Validate a patch and build the update payload.

    Only mentioned fields appear in the result. Optional fields supplied as
    None or blank map to None so the store clears the column.

    Raises:
        ValidationError: If no field is mentioned or a mentioned field is invalid
    """
    present = patch.present_fields()
    if not present:
        raise ValidationError("Update must include at least one field")

    year_limit = _current_year(current_year)
    collector = _ErrorCollector()
    payload: dict[str, Any] = {}

    for name, value in present.items():
        if name in ("make", "model"):
            payload[name] = collector.required_text(name, value)
        elif name == "price":
            collector.price(value)
            payload[name] = value
        elif name == "year":
            collector.year(value, year_limit)
            payload[name] = value
        elif name == "mileage":
            if value is None:
                collector.add("mileage", "Cannot be cleared", "REQUIRED")
            collector.mileage(value)
            payload[name] = value
        elif name == "status":
            member = collector.enum("status", VehicleStatus, value)
            if member is None and not collector.errors_for("status"):
                collector.add("status", "Cannot be cleared", "REQUIRED")
            payload[name] = member.value if member is not None else None
        elif name in ENUM_FIELDS:
            member = collector.enum(name, ENUM_FIELDS[name], value)
            payload[name] = member.value if member is not None else None
        elif name in ("seating", "doors"):
            collector.bounded(name, value, SEATING_RANGE if name == "seating" else DOORS_RANGE)
            payload[name] = None if _is_empty_number(value) else value
        elif name in LIST_FIELDS:
            payload[name] = clean_entries(value)
        else:
            # Free-text optional fields and vin
            payload[name] = _clean_text(value)

    collector.raise_if_any()
    return payload
