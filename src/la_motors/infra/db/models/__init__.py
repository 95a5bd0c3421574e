from la_motors.infra.db.models.base import Base
from la_motors.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "VehicleRow"]
