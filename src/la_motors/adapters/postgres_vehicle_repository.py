"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from la_motors.domain.errors import PersistenceError, TransientReadFailure
from la_motors.domain.vehicle import Vehicle, from_stored
from la_motors.infra.db.models.vehicle import VehicleRow
from la_motors.ports.vehicle_repository import VehicleRepository


def _diagnostic(exc: SQLAlchemyError) -> str:
    """Driver-level message when available (constraint names, etc.)."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _parse_id(vehicle_id: str) -> UUID | None:
    try:
        return UUID(vehicle_id)
    except ValueError:
        return None


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Uses SQLAlchemy ORM for database access
    - Lets server defaults fill omitted columns (flush + refresh after writes)
    - Translates SQLAlchemyError into TransientReadFailure / PersistenceError
    - Converts VehicleRow (infrastructure) to Vehicle (domain)

    Transactions are owned by the session provider; this class only flushes.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Vehicle]:
        query = select(VehicleRow).order_by(VehicleRow.created_at.desc())
        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise TransientReadFailure("list vehicles", _diagnostic(exc)) from exc
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        uid = _parse_id(vehicle_id)
        if uid is None:
            return None

        query = select(VehicleRow).where(VehicleRow.id == uid)
        try:
            row = self._session.execute(query).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise TransientReadFailure("load vehicle", _diagnostic(exc)) from exc
        return self._to_domain(row) if row else None

    def insert(self, payload: dict[str, Any]) -> Vehicle:
        row = VehicleRow(**payload)
        try:
            self._session.add(row)
            self._session.flush()
            self._session.refresh(row)
        except SQLAlchemyError as exc:
            raise PersistenceError("create vehicle", _diagnostic(exc)) from exc
        return self._to_domain(row)

    def update(self, vehicle_id: str, payload: dict[str, Any]) -> Vehicle | None:
        uid = _parse_id(vehicle_id)
        if uid is None:
            return None

        try:
            row = self._session.get(VehicleRow, uid)
            if row is None:
                return None
            for column, value in payload.items():
                setattr(row, column, value)
            self._session.flush()
            self._session.refresh(row)
        except SQLAlchemyError as exc:
            raise PersistenceError("update vehicle", _diagnostic(exc)) from exc
        return self._to_domain(row)

    def delete(self, vehicle_id: str) -> bool:
        uid = _parse_id(vehicle_id)
        if uid is None:
            return False

        try:
            result = self._session.execute(delete(VehicleRow).where(VehicleRow.id == uid))
        except SQLAlchemyError as exc:
            raise PersistenceError("delete vehicle", _diagnostic(exc)) from exc
        return bool(result.rowcount)

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Enum columns go through from_stored so an unexpected value is carried
        through instead of failing the whole listing.
        """
        return Vehicle(
            id=str(row.id),  # UUID -> str
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,
            mileage=row.mileage if row.mileage is not None else 0,
            status=from_stored("status", row.status),
            fuel_type=from_stored("fuel_type", row.fuel_type),
            transmission=from_stored("transmission", row.transmission),
            drivetrain=from_stored("drivetrain", row.drivetrain),
            exterior_color=row.exterior_color,
            interior_color=row.interior_color,
            images=list(row.images or []),
            features=list(row.features or []),
            engine=row.engine,
            seating=row.seating,
            doors=row.doors,
            body_style=row.body_style,
            description=row.description,
            vin=row.vin,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
