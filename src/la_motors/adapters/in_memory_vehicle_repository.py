from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable

from la_motors.domain.inventory_query import SortKey, sort_vehicles
from la_motors.domain.vehicle import Vehicle, from_stored
from la_motors.ports.vehicle_repository import VehicleRepository


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Assigns uuid4 ids and timestamps from the injected clock
    - Applies store defaults for omitted columns (empty lists, status, mileage)
    - Lists newest first, ties in insertion order
    """

    def __init__(
        self,
        vehicles: list[Vehicle] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._vehicles: dict[str, Vehicle] = {v.id: v for v in vehicles or []}
        self._clock = clock

    def list_all(self) -> list[Vehicle]:
        return sort_vehicles(self._vehicles.values(), SortKey.NEWEST)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def insert(self, payload: dict[str, Any]) -> Vehicle:
        now = self._clock()
        vehicle = Vehicle(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **self._convert(payload),
        )
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    def update(self, vehicle_id: str, payload: dict[str, Any]) -> Vehicle | None:
        current = self._vehicles.get(vehicle_id)
        if current is None:
            return None

        updated = replace(current, updated_at=self._clock(), **self._convert(payload))
        self._vehicles[vehicle_id] = updated
        return updated

    def delete(self, vehicle_id: str) -> bool:
        return self._vehicles.pop(vehicle_id, None) is not None

    def _convert(self, payload: dict[str, Any]) -> dict[str, Any]:
        converted = {name: from_stored(name, value) for name, value in payload.items()}
        for name in ("images", "features"):
            if name in converted:
                converted[name] = list(converted[name] or [])
        return converted
