from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from la_motors.domain.errors import NotFoundError
from la_motors.domain.shaping import shape_update_payload
from la_motors.domain.vehicle import Vehicle, VehiclePatch
from la_motors.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateVehicleRequest:
    vehicle_id: str
    patch: VehiclePatch


@dataclass(frozen=True, slots=True)
class UpdateVehicleResponse:
    vehicle: Vehicle


class UpdateVehicle:
    """
    Partial update of a vehicle.

    Only fields mentioned in the patch are written. A mentioned-but-empty
    optional field clears the column; an unmentioned one is left alone.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = vehicle_repository
        self._today = today

    def execute(self, request: UpdateVehicleRequest) -> UpdateVehicleResponse:
        """
        Raises:
            ValidationError: If the patch is empty or a mentioned field is invalid
            NotFoundError: If no vehicle has this id
            PersistenceError: If the store rejects the update
        """
        payload = shape_update_payload(request.patch, current_year=self._today().year)

        vehicle = self._repository.update(request.vehicle_id, payload)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        logger.info(
            "Vehicle updated",
            extra={"vehicle_id": vehicle.id, "fields": sorted(payload)},
        )
        return UpdateVehicleResponse(vehicle=vehicle)
