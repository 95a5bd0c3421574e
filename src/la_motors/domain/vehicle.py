from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum, StrEnum
from typing import Any, Literal


class FuelType(StrEnum):
    GASOLINE = "Gasoline"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"


class Transmission(StrEnum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    CVT = "CVT"


class Drivetrain(StrEnum):
    FWD = "FWD"
    RWD = "RWD"
    AWD = "AWD"
    FOUR_WD = "4WD"


class VehicleStatus(StrEnum):
    AVAILABLE = "available"
    SOLD = "sold"
    PENDING = "pending"


STATUS_LABELS: dict[str, str] = {
    VehicleStatus.AVAILABLE: "Available",
    VehicleStatus.SOLD: "Sold",
    VehicleStatus.PENDING: "Pending",
}


def status_label(status: str) -> str:
    """Display label for a status; unrecognized values are shown verbatim."""
    return STATUS_LABELS.get(status, status)


_STORED_ENUMS: dict[str, type[StrEnum]] = {
    "status": VehicleStatus,
    "fuel_type": FuelType,
    "transmission": Transmission,
    "drivetrain": Drivetrain,
}


def from_stored(name: str, value: Any) -> Any:
    """Lenient read-side conversion: enum member when recognized, raw value otherwise."""
    enum_cls = _STORED_ENUMS.get(name)
    if enum_cls is None or value is None:
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True, slots=True)
class Vehicle:
    """
    A persisted vehicle record.

    Enum-typed fields hold the enum member when the stored value is
    recognized, otherwise the raw stored string (rows written before the
    enums were closed still load).
    """

    id: str
    make: str
    model: str
    year: int
    price: int
    mileage: int = 0
    status: VehicleStatus | str = VehicleStatus.AVAILABLE
    fuel_type: FuelType | str | None = None
    transmission: Transmission | str | None = None
    drivetrain: Drivetrain | str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    images: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    engine: str | None = None
    seating: int | None = None
    doors: int | None = None
    body_style: str | None = None
    description: str | None = None
    vin: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None


@dataclass(frozen=True, slots=True)
class VehicleDraft:
    """Candidate record for creation (no identifier or timestamps yet)."""

    make: str
    model: str
    year: int | None
    price: int | None
    mileage: int | None = None
    status: VehicleStatus | str | None = None
    fuel_type: FuelType | str | None = None
    transmission: Transmission | str | None = None
    drivetrain: Drivetrain | str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    images: list[str] | None = None
    features: list[str] | None = None
    engine: str | None = None
    seating: int | None = None
    doors: int | None = None
    body_style: str | None = None
    description: str | None = None
    vin: str | None = None


class Unset(Enum):
    """Marker for a patch field the caller did not mention."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Literal[Unset.UNSET] = Unset.UNSET


@dataclass(frozen=True, slots=True)
class VehiclePatch:
    """
    Partial update of a vehicle.

    Each field has three states:
    - UNSET: not mentioned, the stored value is left alone
    - None or blank: cleared to null (optional fields only)
    - anything else: set
    """

    make: str | None | Unset = UNSET
    model: str | None | Unset = UNSET
    year: int | None | Unset = UNSET
    price: int | None | Unset = UNSET
    mileage: int | None | Unset = UNSET
    status: VehicleStatus | str | None | Unset = UNSET
    fuel_type: FuelType | str | None | Unset = UNSET
    transmission: Transmission | str | None | Unset = UNSET
    drivetrain: Drivetrain | str | None | Unset = UNSET
    exterior_color: str | None | Unset = UNSET
    interior_color: str | None | Unset = UNSET
    images: list[str] | None | Unset = UNSET
    features: list[str] | None | Unset = UNSET
    engine: str | None | Unset = UNSET
    seating: int | None | Unset = UNSET
    doors: int | None | Unset = UNSET
    body_style: str | None | Unset = UNSET
    description: str | None | Unset = UNSET
    vin: str | None | Unset = UNSET

    def present_fields(self) -> dict[str, Any]:
        """Fields the caller mentioned, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
