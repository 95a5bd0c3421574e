from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from la_motors.domain.vehicle import Vehicle, VehicleStatus


@dataclass(frozen=True, slots=True)
class InventoryStats:
    total: int
    available: int
    sold: int
    pending: int
    total_value: int


def compute_stats(vehicles: Iterable[Vehicle]) -> InventoryStats:
    """Aggregate status counts and summed price over a fetched collection."""
    counts = {status: 0 for status in VehicleStatus}
    total = 0
    total_value = 0

    for vehicle in vehicles:
        total += 1
        total_value += vehicle.price
        if vehicle.status in counts:
            counts[vehicle.status] += 1  # type: ignore[index]

    return InventoryStats(
        total=total,
        available=counts[VehicleStatus.AVAILABLE],
        sold=counts[VehicleStatus.SOLD],
        pending=counts[VehicleStatus.PENDING],
        total_value=total_value,
    )
