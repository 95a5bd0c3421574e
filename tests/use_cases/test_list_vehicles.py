"""Test suite for ListVehicles use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from factories import make_vehicle
from la_motors.domain.errors import PersistenceError, TransientReadFailure
from la_motors.ports.vehicle_repository import VehicleRepository
from la_motors.use_cases.list_vehicles import ListVehicles, ListVehiclesResponse


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock VehicleRepository."""
    return Mock(spec=VehicleRepository)


def test_execute_returns_repository_listing(mock_repository: Mock) -> None:
    """Use case returns vehicles in repository order."""
    vehicles = [make_vehicle(id="b"), make_vehicle(id="a")]
    mock_repository.list_all.return_value = vehicles

    result = ListVehicles(mock_repository).execute()

    assert isinstance(result, ListVehiclesResponse)
    assert result.vehicles == vehicles


@pytest.mark.parametrize(
    "error",
    [
        TransientReadFailure("list vehicles", "connection refused"),
        PersistenceError("list vehicles", "permission denied for table vehicles"),
    ],
)
def test_execute_degrades_to_empty_on_read_failure(
    mock_repository: Mock, error: PersistenceError, caplog: pytest.LogCaptureFixture
) -> None:
    """A failing store yields an empty inventory and a warning, never an exception."""
    mock_repository.list_all.side_effect = error

    result = ListVehicles(mock_repository).execute()

    assert result.vehicles == []
    assert "Vehicle listing failed" in caplog.text


def test_execute_does_not_swallow_programming_errors(mock_repository: Mock) -> None:
    """Only store failures are absorbed."""
    mock_repository.list_all.side_effect = TypeError("bug")

    with pytest.raises(TypeError):
        ListVehicles(mock_repository).execute()
