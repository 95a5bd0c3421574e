"""
Unit test suite for PostgresVehicleRepository.

This test suite verifies the PostgreSQL implementation using mocks.
Tests verify:
- Reads map rows to domain vehicles (UUID → string, lenient enums)
- Invalid identifiers never reach the database
- Writes flush and refresh so server defaults come back
- SQLAlchemyError is translated to TransientReadFailure / PersistenceError
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from la_motors.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from la_motors.domain.errors import PersistenceError, TransientReadFailure
from la_motors.domain.vehicle import FuelType, VehicleStatus
from la_motors.infra.db.models.vehicle import VehicleRow

VEHICLE_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
CREATED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def mock_session() -> Mock:
    """Mock SQLAlchemy session."""
    return Mock(spec=Session)


@pytest.fixture()
def vehicle_row() -> VehicleRow:
    return VehicleRow(
        id=VEHICLE_ID,
        make="BMW",
        model="M3 Competition",
        year=2024,
        price=89_900_000,
        mileage=1_250,
        status="available",
        fuel_type="Gasoline",
        transmission="Automatic",
        drivetrain="RWD",
        images=["https://cdn/a.jpg"],
        features=["Carbon roof"],
        vin="WBS83AY000F123456",
        created_at=CREATED,
        updated_at=CREATED,
    )


def db_error(cls: type, message: str) -> Exception:
    return cls("SELECT 1", {}, Exception(message))


# ==============================================================================
# Reads
# ==============================================================================


def test_list_all_maps_rows_to_domain(mock_session: Mock, vehicle_row: VehicleRow) -> None:
    """Rows become domain vehicles with string ids and enum members."""
    result = Mock()
    result.scalars.return_value.all.return_value = [vehicle_row]
    mock_session.execute.return_value = result

    vehicles = PostgresVehicleRepository(mock_session).list_all()

    assert mock_session.execute.call_count == 1
    [vehicle] = vehicles
    assert vehicle.id == str(VEHICLE_ID)
    assert vehicle.price == 89_900_000
    assert vehicle.status is VehicleStatus.AVAILABLE
    assert vehicle.fuel_type is FuelType.GASOLINE
    assert vehicle.images == ["https://cdn/a.jpg"]
    assert vehicle.created_at == CREATED


def test_list_all_keeps_unrecognized_enum_values(
    mock_session: Mock, vehicle_row: VehicleRow
) -> None:
    """A legacy value does not fail the whole listing."""
    vehicle_row.fuel_type = "Gasolina"
    result = Mock()
    result.scalars.return_value.all.return_value = [vehicle_row]
    mock_session.execute.return_value = result

    [vehicle] = PostgresVehicleRepository(mock_session).list_all()

    assert vehicle.fuel_type == "Gasolina"


def test_list_all_translates_database_errors(mock_session: Mock) -> None:
    """Read failures surface as TransientReadFailure."""
    mock_session.execute.side_effect = db_error(OperationalError, "connection refused")

    with pytest.raises(TransientReadFailure) as exc_info:
        PostgresVehicleRepository(mock_session).list_all()

    assert exc_info.value.diagnostic == "connection refused"


def test_get_by_id_returns_vehicle(mock_session: Mock, vehicle_row: VehicleRow) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = vehicle_row

    vehicle = PostgresVehicleRepository(mock_session).get_by_id(str(VEHICLE_ID))

    assert vehicle is not None
    assert vehicle.make == "BMW"


def test_get_by_id_returns_none_when_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    assert PostgresVehicleRepository(mock_session).get_by_id(str(uuid.uuid4())) is None


def test_get_by_id_with_invalid_uuid_skips_query(mock_session: Mock) -> None:
    """Malformed ids never reach the database."""
    assert PostgresVehicleRepository(mock_session).get_by_id("not-a-uuid") is None
    mock_session.execute.assert_not_called()


def test_get_by_id_translates_database_errors(mock_session: Mock) -> None:
    mock_session.execute.side_effect = db_error(OperationalError, "timeout")

    with pytest.raises(TransientReadFailure):
        PostgresVehicleRepository(mock_session).get_by_id(str(VEHICLE_ID))


# ==============================================================================
# Writes
# ==============================================================================


def test_insert_adds_flushes_and_refreshes(mock_session: Mock) -> None:
    """Insert lets the server fill defaults and returns the refreshed row."""
    payload = {
        "make": "Toyota",
        "model": "Corolla LE",
        "year": 2015,
        "price": 7_200_000,
        "mileage": 0,
        "status": "available",
        "images": [],
        "vin": "AUTO1700000000000ABC123",
    }

    vehicle = PostgresVehicleRepository(mock_session).insert(payload)

    added = mock_session.add.call_args.args[0]
    assert isinstance(added, VehicleRow)
    assert added.make == "Toyota"
    mock_session.flush.assert_called_once()
    mock_session.refresh.assert_called_once_with(added)
    assert vehicle.make == "Toyota"
    assert vehicle.features == []


def test_insert_translates_errors_with_driver_diagnostic(mock_session: Mock) -> None:
    """The driver's message is carried verbatim."""
    mock_session.flush.side_effect = db_error(
        IntegrityError, 'null value in column "make" violates not-null constraint'
    )

    with pytest.raises(PersistenceError) as exc_info:
        PostgresVehicleRepository(mock_session).insert({"make": None})

    assert exc_info.value.operation == "create vehicle"
    assert exc_info.value.diagnostic == (
        'null value in column "make" violates not-null constraint'
    )


def test_update_writes_only_payload_columns(mock_session: Mock, vehicle_row: VehicleRow) -> None:
    mock_session.get.return_value = vehicle_row

    vehicle = PostgresVehicleRepository(mock_session).update(
        str(VEHICLE_ID), {"price": 85_000_000, "description": None}
    )

    assert vehicle is not None
    assert vehicle.price == 85_000_000
    assert vehicle.description is None
    assert vehicle.model == "M3 Competition"
    mock_session.get.assert_called_once_with(VehicleRow, VEHICLE_ID)
    mock_session.flush.assert_called_once()


def test_update_returns_none_when_missing(mock_session: Mock) -> None:
    mock_session.get.return_value = None

    assert PostgresVehicleRepository(mock_session).update(str(VEHICLE_ID), {"price": 1}) is None
    mock_session.flush.assert_not_called()


def test_update_with_invalid_uuid_returns_none(mock_session: Mock) -> None:
    assert PostgresVehicleRepository(mock_session).update("nope", {"price": 1}) is None
    mock_session.get.assert_not_called()


def test_update_translates_errors(mock_session: Mock, vehicle_row: VehicleRow) -> None:
    mock_session.get.return_value = vehicle_row
    mock_session.flush.side_effect = db_error(OperationalError, "server closed the connection")

    with pytest.raises(PersistenceError) as exc_info:
        PostgresVehicleRepository(mock_session).update(str(VEHICLE_ID), {"price": 1})

    assert exc_info.value.operation == "update vehicle"


def test_delete_reports_whether_a_row_was_removed(mock_session: Mock) -> None:
    mock_session.execute.return_value.rowcount = 1
    assert PostgresVehicleRepository(mock_session).delete(str(VEHICLE_ID)) is True

    mock_session.execute.return_value.rowcount = 0
    assert PostgresVehicleRepository(mock_session).delete(str(VEHICLE_ID)) is False


def test_delete_with_invalid_uuid_is_false(mock_session: Mock) -> None:
    assert PostgresVehicleRepository(mock_session).delete("nope") is False
    mock_session.execute.assert_not_called()


def test_delete_translates_errors(mock_session: Mock) -> None:
    mock_session.execute.side_effect = db_error(IntegrityError, "foreign key violation")

    with pytest.raises(PersistenceError) as exc_info:
        PostgresVehicleRepository(mock_session).delete(str(VEHICLE_ID))

    assert exc_info.value.diagnostic == "foreign key violation"
