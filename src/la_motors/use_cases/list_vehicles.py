from __future__ import annotations

import logging
from dataclasses import dataclass

from la_motors.domain.errors import PersistenceError
from la_motors.domain.vehicle import Vehicle
from la_motors.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListVehiclesResponse:
    vehicles: list[Vehicle]


class ListVehicles:
    """
    Fetch the full inventory, newest first.

    Read failures degrade to an empty inventory instead of propagating:
    browsing must keep working when the record store is down, and no
    persisted state is at risk on this path.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self) -> ListVehiclesResponse:
        try:
            vehicles = self._repository.list_all()
        except PersistenceError as exc:
            logger.warning(
                "Vehicle listing failed, serving empty inventory",
                extra={"error_code": exc.error_code, "diagnostic": exc.diagnostic},
            )
            return ListVehiclesResponse(vehicles=[])

        return ListVehiclesResponse(vehicles=vehicles)
