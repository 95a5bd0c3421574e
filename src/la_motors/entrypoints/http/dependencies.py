"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, never cached.
Only stateless singletons (the image storage adapter) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import BackgroundTasks, Depends
from sqlalchemy.orm import Session

from la_motors.adapters.local_image_storage import LocalImageStorage
from la_motors.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from la_motors.infra.config import (
    VEHICLE_STORAGE_BUCKET,
    storage_public_base_url,
    storage_root,
)
from la_motors.infra.db.session import get_session
from la_motors.ports.image_storage import ImageStorage
from la_motors.ports.vehicle_repository import VehicleRepository
from la_motors.use_cases.create_vehicle import CreateVehicle
from la_motors.use_cases.delete_vehicle import DeleteVehicle
from la_motors.use_cases.delete_vehicle_image import DeleteVehicleImage
from la_motors.use_cases.get_inventory_stats import GetInventoryStats
from la_motors.use_cases.get_vehicle_by_id import GetVehicleById
from la_motors.use_cases.search_inventory import SearchInventory
from la_motors.use_cases.update_vehicle import UpdateVehicle
from la_motors.use_cases.upload_vehicle_image import UploadVehicleImage


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return PostgresVehicleRepository(session=db)


@lru_cache
def get_image_storage() -> ImageStorage:
    return LocalImageStorage(
        root=storage_root(),
        public_base_url=storage_public_base_url(),
        bucket=VEHICLE_STORAGE_BUCKET,
    )


def get_search_inventory_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> SearchInventory:
    return SearchInventory(vehicle_repository=repository)


def get_vehicle_by_id_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=repository)


def get_inventory_stats_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetInventoryStats:
    return GetInventoryStats(vehicle_repository=repository)


def get_create_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> CreateVehicle:
    return CreateVehicle(vehicle_repository=repository)


def get_update_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> UpdateVehicle:
    return UpdateVehicle(vehicle_repository=repository)


def get_delete_vehicle_image_use_case(
    storage: ImageStorage = Depends(get_image_storage),
) -> DeleteVehicleImage:
    return DeleteVehicleImage(image_storage=storage)


def get_delete_vehicle_use_case(
    background_tasks: BackgroundTasks,
    repository: VehicleRepository = Depends(get_vehicle_repository),
    delete_image: DeleteVehicleImage = Depends(get_delete_vehicle_image_use_case),
) -> DeleteVehicle:
    """
    Image cleanup runs as a background task after the response is sent,
    so a slow or failing object store never delays or fails the delete.
    """
    return DeleteVehicle(
        vehicle_repository=repository,
        delete_image=delete_image,
        schedule=background_tasks.add_task,
    )


def get_upload_vehicle_image_use_case(
    storage: ImageStorage = Depends(get_image_storage),
) -> UploadVehicleImage:
    return UploadVehicleImage(image_storage=storage)
