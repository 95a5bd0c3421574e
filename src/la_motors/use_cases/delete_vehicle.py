from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from la_motors.domain.errors import NotFoundError
from la_motors.ports.vehicle_repository import VehicleRepository
from la_motors.use_cases.delete_vehicle_image import (
    DeleteVehicleImage,
    DeleteVehicleImageRequest,
)

logger = logging.getLogger(__name__)

# schedule(func, *args): runs func(*args) now or later (e.g. BackgroundTasks.add_task)
CleanupScheduler = Callable[..., Any]


def _run_now(func: Callable[..., Any], *args: Any) -> None:
    func(*args)


@dataclass(frozen=True, slots=True)
class DeleteVehicleRequest:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class DeleteVehicleResponse:
    vehicle_id: str
    images_scheduled: int = 0


class DeleteVehicle:
    """
    Delete a vehicle, then clean up its stored images.

    The cleanup is dispatched through the scheduler only after the record
    delete succeeded, and it has its own error sink (the log), so a storage
    failure can never turn a successful delete into an error.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        delete_image: DeleteVehicleImage | None = None,
        schedule: CleanupScheduler = _run_now,
    ) -> None:
        self._repository = vehicle_repository
        self._delete_image = delete_image
        self._schedule = schedule

    def execute(self, request: DeleteVehicleRequest) -> DeleteVehicleResponse:
        """
        Raises:
            NotFoundError: If no vehicle has this id
            PersistenceError: If the store rejects the delete
        """
        vehicle = self._repository.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        if not self._repository.delete(request.vehicle_id):
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        logger.info("Vehicle deleted", extra={"vehicle_id": request.vehicle_id})

        images = list(vehicle.images)
        if not images or self._delete_image is None:
            return DeleteVehicleResponse(vehicle_id=request.vehicle_id)

        try:
            self._schedule(self.cleanup_images, request.vehicle_id, images)
        except Exception:
            logger.warning(
                "Could not dispatch image cleanup",
                exc_info=True,
                extra={"vehicle_id": request.vehicle_id},
            )
            return DeleteVehicleResponse(vehicle_id=request.vehicle_id)

        return DeleteVehicleResponse(vehicle_id=request.vehicle_id, images_scheduled=len(images))

    def cleanup_images(self, vehicle_id: str, urls: list[str]) -> None:
        """Remove each image; failures are logged and never raised."""
        if self._delete_image is None:
            return
        for url in urls:
            try:
                self._delete_image.execute(DeleteVehicleImageRequest(url=url))
            except Exception:
                logger.warning(
                    "Image cleanup failed after vehicle delete",
                    exc_info=True,
                    extra={"vehicle_id": vehicle_id, "url": url},
                )
