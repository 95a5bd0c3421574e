from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from la_motors.domain.shaping import shape_create_payload
from la_motors.domain.vehicle import Vehicle, VehicleDraft
from la_motors.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateVehicleRequest:
    draft: VehicleDraft


@dataclass(frozen=True, slots=True)
class CreateVehicleResponse:
    vehicle: Vehicle


class CreateVehicle:
    """
    Validate, shape and insert a new vehicle.

    Validation happens before the store is touched. A rejected insert
    surfaces as PersistenceError from the repository and is not retried.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = vehicle_repository
        self._today = today

    def execute(self, request: CreateVehicleRequest) -> CreateVehicleResponse:
        """
        Raises:
            ValidationError: If required fields are missing or out of range
            PersistenceError: If the store rejects the insert
        """
        payload = shape_create_payload(request.draft, current_year=self._today().year)

        vehicle = self._repository.insert(payload)

        logger.info(
            "Vehicle created",
            extra={"vehicle_id": vehicle.id, "make": vehicle.make, "model": vehicle.model},
        )
        return CreateVehicleResponse(vehicle=vehicle)
