from typing import Any

from fastapi import APIRouter, Depends, Response, status

from la_motors.entrypoints.http.auth import require_admin
from la_motors.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_delete_vehicle_use_case,
    get_inventory_stats_use_case,
    get_search_inventory_use_case,
    get_update_vehicle_use_case,
    get_vehicle_by_id_use_case,
)
from la_motors.entrypoints.http.dtos.vehicles import (
    InventoryStatsDTO,
    VehicleCreateDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleSearchResponseDTO,
    VehicleUpdateDTO,
)
from la_motors.entrypoints.http.error_responses import ErrorResponse
from la_motors.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from la_motors.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest
from la_motors.use_cases.delete_vehicle import DeleteVehicle, DeleteVehicleRequest
from la_motors.use_cases.get_inventory_stats import GetInventoryStats
from la_motors.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from la_motors.use_cases.search_inventory import SearchInventory
from la_motors.use_cases.update_vehicle import UpdateVehicle, UpdateVehicleRequest

router = APIRouter(tags=["Vehicles"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Admin password missing or wrong"},
    404: {"model": ErrorResponse, "description": "Vehicle not found"},
    422: {"model": ErrorResponse, "description": "Validation error"},
    502: {"model": ErrorResponse, "description": "Record store rejected the write"},
}


@router.get(
    "/vehicles",
    response_model=VehicleSearchResponseDTO,
    summary="Browse the inventory",
    description="""
    Filter and sort the full inventory.

    ## Filters
    - All filters use AND semantics
    - term: case-insensitive substring of make, model or year
    - make / fuel_type: exact value, or `all`
    - price_band: `all`, `under-50m`, `50m-100m`, `over-100m`

    ## Sorting
    `newest` (default), `price-low`, `price-high`, `year-new`, `year-old`,
    `mileage-low`. Ties keep the newest-first listing order.

    Facets always list every make and fuel type in the inventory, regardless
    of the active filters.
    """,
    responses={422: _ERROR_RESPONSES[422]},
)
def search_vehicles(
    query: VehicleSearchQueryDTO = Depends(),
    use_case: SearchInventory = Depends(get_search_inventory_use_case),
) -> VehicleSearchResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    request = VehicleMapper.to_search_request(query)
    result = use_case.execute(request)
    return VehicleMapper.to_search_response(result)


@router.get(
    "/vehicles/stats",
    response_model=InventoryStatsDTO,
    summary="Inventory totals by status",
)
def get_inventory_stats(
    use_case: GetInventoryStats = Depends(get_inventory_stats_use_case),
) -> InventoryStatsDTO:
    result = use_case.execute()
    return VehicleMapper.to_stats_response(result.stats)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Vehicle detail",
    responses={404: _ERROR_RESPONSES[404], 422: _ERROR_RESPONSES[422]},
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.post(
    "/vehicles",
    response_model=VehicleResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a vehicle",
    dependencies=[Depends(require_admin)],
    responses={code: _ERROR_RESPONSES[code] for code in (401, 422, 502)},
)
def create_vehicle(
    body: VehicleCreateDTO,
    use_case: CreateVehicle = Depends(get_create_vehicle_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(CreateVehicleRequest(draft=VehicleMapper.to_draft(body)))
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.patch(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Update some fields of a vehicle",
    description="""
    Only keys present in the body are written. Sending `null` or `""` for an
    optional field clears it; omitting the key leaves it unchanged.
    """,
    dependencies=[Depends(require_admin)],
    responses=_ERROR_RESPONSES,
)
def update_vehicle(
    vehicle_id: str,
    body: VehicleUpdateDTO,
    use_case: UpdateVehicle = Depends(get_update_vehicle_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(
        UpdateVehicleRequest(vehicle_id=vehicle_id, patch=VehicleMapper.to_patch(body))
    )
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.delete(
    "/vehicles/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a vehicle",
    description="Stored images are removed afterwards on a best-effort basis.",
    dependencies=[Depends(require_admin)],
    responses={code: _ERROR_RESPONSES[code] for code in (401, 404, 502)},
)
def delete_vehicle(
    vehicle_id: str,
    use_case: DeleteVehicle = Depends(get_delete_vehicle_use_case),
) -> Response:
    use_case.execute(DeleteVehicleRequest(vehicle_id=vehicle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
