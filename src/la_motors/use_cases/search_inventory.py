from __future__ import annotations

from dataclasses import dataclass, field

from la_motors.domain.inventory_query import (
    InventoryCriteria,
    InventoryFacets,
    apply_criteria,
    count_active_criteria,
    derive_facets,
)
from la_motors.domain.vehicle import Vehicle
from la_motors.ports.vehicle_repository import VehicleRepository
from la_motors.use_cases.list_vehicles import ListVehicles


@dataclass(frozen=True, slots=True)
class SearchInventoryRequest:
    criteria: InventoryCriteria = field(default_factory=InventoryCriteria)

    @classmethod
    def for_term(cls, term: str) -> SearchInventoryRequest:
        """Plain text search with every other criterion at its default."""
        return cls(criteria=InventoryCriteria(term=term))


@dataclass(frozen=True, slots=True)
class SearchInventoryResponse:
    vehicles: list[Vehicle]
    facets: InventoryFacets
    active_criteria: int = 0

    @property
    def total_count(self) -> int:
        return len(self.vehicles)


class SearchInventory:
    """
    Gallery query: load the inventory, then filter and sort it in memory.

    Facets come from the full collection so every make stays selectable even
    when the current filters hide it. The listing degrades to empty on read
    failure (see ListVehicles), which yields an empty result and empty facets.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._list_vehicles = ListVehicles(vehicle_repository)

    def execute(self, request: SearchInventoryRequest) -> SearchInventoryResponse:
        vehicles = self._list_vehicles.execute().vehicles

        return SearchInventoryResponse(
            vehicles=apply_criteria(vehicles, request.criteria),
            facets=derive_facets(vehicles),
            active_criteria=count_active_criteria(request.criteria),
        )
