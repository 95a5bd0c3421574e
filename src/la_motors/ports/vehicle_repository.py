from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from la_motors.domain.vehicle import Vehicle


class VehicleRepository(ABC):
    """
    Port for the vehicle record store.

    Contract (Preconditions):
        - payloads are already validated and shaped by the caller (UseCase)
        - implementations write them as-is and do not re-validate

    Contract (Failures):
        - read failures raise TransientReadFailure
        - write failures raise PersistenceError carrying the store diagnostic
    """

    @abstractmethod
    def list_all(self) -> list[Vehicle]:
        """Every vehicle, most recently created first."""
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """The vehicle with this id, or None when it does not exist."""
        ...

    @abstractmethod
    def insert(self, payload: dict[str, Any]) -> Vehicle:
        """
        Insert one row and return it as stored.

        The store assigns id, created_at and updated_at, and fills its own
        defaults for columns missing from the payload.
        """
        ...

    @abstractmethod
    def update(self, vehicle_id: str, payload: dict[str, Any]) -> Vehicle | None:
        """
        Write the given columns and return the stored row.

        Columns absent from the payload are untouched; None values clear.
        Returns None when no vehicle has this id.
        """
        ...

    @abstractmethod
    def delete(self, vehicle_id: str) -> bool:
        """Remove the vehicle. Returns False when no vehicle had this id."""
        ...
