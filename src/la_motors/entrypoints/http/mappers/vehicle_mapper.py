from __future__ import annotations

from la_motors.domain.inventory_query import InventoryCriteria
from la_motors.domain.stats import InventoryStats
from la_motors.domain.vehicle import Vehicle, VehicleDraft, VehiclePatch, status_label
from la_motors.entrypoints.http.dtos.vehicles import (
    FacetsDTO,
    InventoryStatsDTO,
    VehicleCreateDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleSearchResponseDTO,
    VehicleUpdateDTO,
)
from la_motors.use_cases.search_inventory import (
    SearchInventoryRequest,
    SearchInventoryResponse,
)


def _text(value: object) -> str | None:
    return None if value is None else str(value)


class VehicleMapper:
    """Maps between REST DTOs and domain models for the vehicle endpoints."""

    @staticmethod
    def to_search_request(dto: VehicleSearchQueryDTO) -> SearchInventoryRequest:
        return SearchInventoryRequest(
            criteria=InventoryCriteria(
                term=dto.term,
                make=dto.make,
                fuel_type=dto.fuel_type,
                price_band=dto.price_band,
                sort=dto.sort,
            )
        )

    @staticmethod
    def to_draft(dto: VehicleCreateDTO) -> VehicleDraft:
        return VehicleDraft(**dto.model_dump())

    @staticmethod
    def to_patch(dto: VehicleUpdateDTO) -> VehiclePatch:
        """
        Only keys present in the request body become patch fields.

        model_fields_set is what separates "not sent" (UNSET) from
        "sent as null" (clear).
        """
        return VehiclePatch(**dto.model_dump(include=dto.model_fields_set))

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle to REST response DTO.

        Enum members are flattened to their values; unrecognized stored values
        pass through verbatim, including in status_label.
        """
        status = str(vehicle.status)
        return VehicleResponseDTO(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            price=vehicle.price,
            mileage=vehicle.mileage,
            status=status,
            status_label=status_label(status),
            fuel_type=_text(vehicle.fuel_type),
            transmission=_text(vehicle.transmission),
            drivetrain=_text(vehicle.drivetrain),
            exterior_color=vehicle.exterior_color,
            interior_color=vehicle.interior_color,
            images=list(vehicle.images),
            primary_image=vehicle.primary_image,
            features=list(vehicle.features),
            engine=vehicle.engine,
            seating=vehicle.seating,
            doors=vehicle.doors,
            body_style=vehicle.body_style,
            description=vehicle.description,
            vin=vehicle.vin,
            created_at=vehicle.created_at,
            updated_at=vehicle.updated_at,
        )

    @staticmethod
    def to_search_response(result: SearchInventoryResponse) -> VehicleSearchResponseDTO:
        return VehicleSearchResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(v) for v in result.vehicles],
            total=result.total_count,
            facets=FacetsDTO(
                makes=result.facets.makes,
                fuel_types=result.facets.fuel_types,
            ),
            active_filters=result.active_criteria,
        )

    @staticmethod
    def to_stats_response(stats: InventoryStats) -> InventoryStatsDTO:
        return InventoryStatsDTO(
            total=stats.total,
            available=stats.available,
            sold=stats.sold,
            pending=stats.pending,
            total_value=stats.total_value,
        )
