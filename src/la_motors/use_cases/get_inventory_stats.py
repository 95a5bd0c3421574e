from __future__ import annotations

from dataclasses import dataclass

from la_motors.domain.stats import InventoryStats, compute_stats
from la_motors.ports.vehicle_repository import VehicleRepository
from la_motors.use_cases.list_vehicles import ListVehicles


@dataclass(frozen=True, slots=True)
class GetInventoryStatsResponse:
    stats: InventoryStats


class GetInventoryStats:
    """Status counts and total value, recomputed from a fresh listing on every call."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._list_vehicles = ListVehicles(vehicle_repository)

    def execute(self) -> GetInventoryStatsResponse:
        vehicles = self._list_vehicles.execute().vehicles
        return GetInventoryStatsResponse(stats=compute_stats(vehicles))
