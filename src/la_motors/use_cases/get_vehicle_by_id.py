"""Get vehicle by ID use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from la_motors.domain.errors import NotFoundError, TransientReadFailure, ValidationError
from la_motors.domain.vehicle import Vehicle
from la_motors.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle."""

    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for the detail view.

    Responsibilities:
    - Validate vehicle_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist, or if the store
      could not be read (read paths do not hard-fail)
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the get vehicle by ID use case.

        Raises:
            ValidationError: If vehicle_id is not a valid UUID format
            NotFoundError: If the vehicle is missing or unreadable
        """
        try:
            UUID(request.vehicle_id)
        except ValueError:
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID",
                    }
                ]
            )

        try:
            vehicle = self._repository.get_by_id(request.vehicle_id)
        except TransientReadFailure as exc:
            logger.warning(
                "Vehicle lookup failed, reporting as not found",
                extra={"vehicle_id": request.vehicle_id, "diagnostic": exc.diagnostic},
            )
            vehicle = None

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
