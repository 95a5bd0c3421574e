from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from la_motors.domain.inventory_query import PriceBand, SortKey


class VehicleResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: int
    mileage: int
    status: str
    status_label: str
    fuel_type: str | None = None
    transmission: str | None = None
    drivetrain: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    images: list[str] = Field(default_factory=list)
    primary_image: str | None = None
    features: list[str] = Field(default_factory=list)
    engine: str | None = None
    seating: int | None = None
    doors: int | None = None
    body_style: str | None = None
    description: str | None = None
    vin: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VehicleSearchQueryDTO(BaseModel):
    """Query parameters for the inventory gallery."""

    term: str = Field(
        default="",
        description="Case-insensitive substring of make, model or year",
        examples=["bmw"],
    )
    make: str = Field(
        default="all",
        description="Exact make, or 'all'",
        examples=["Toyota"],
    )
    fuel_type: str = Field(
        default="all",
        description="Exact fuel type, or 'all'",
        examples=["Hybrid"],
    )
    price_band: PriceBand = Field(
        default=PriceBand.ALL,
        description="under-50m: < 50,000,000; 50m-100m: [50,000,000, 100,000,000); over-100m: >= 100,000,000",
    )
    sort: SortKey = Field(
        default=SortKey.NEWEST,
        description="Ordering applied after filtering (stable)",
    )


class FacetsDTO(BaseModel):
    makes: list[str]
    fuel_types: list[str]


class VehicleSearchResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
    total: int
    facets: FacetsDTO
    active_filters: int


class InventoryStatsDTO(BaseModel):
    total: int
    available: int
    sold: int
    pending: int
    total_value: int


class VehicleCreateDTO(BaseModel):
    """
    Body for creating a vehicle.

    Range and enum checks run in the domain so every violation is reported
    together; this model only enforces JSON types.
    """

    make: str
    model: str
    year: int | None = None
    price: int | None = None
    mileage: int | None = None
    status: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    drivetrain: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    images: list[str] | None = None
    features: list[str] | None = None
    engine: str | None = None
    seating: int | None = None
    doors: int | None = None
    body_style: str | None = None
    description: str | None = None
    vin: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Corolla LE",
                "year": 2015,
                "price": 7200000,
                "mileage": 154728,
                "transmission": "Automatic",
                "drivetrain": "FWD",
                "engine": "1.800 cc",
                "images": ["https://example.com/corolla.jpg"],
            }
        }
    )


class VehicleUpdateDTO(BaseModel):
    """
    Body for a partial update.

    Keys left out of the JSON are not touched. Keys sent as null or "" clear
    optional columns.
    """

    make: str | None = None
    model: str | None = None
    year: int | None = None
    price: int | None = None
    mileage: int | None = None
    status: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    drivetrain: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    images: list[str] | None = None
    features: list[str] | None = None
    engine: str | None = None
    seating: int | None = None
    doors: int | None = None
    body_style: str | None = None
    description: str | None = None
    vin: str | None = None


class ImageUploadResponseDTO(BaseModel):
    url: str
    path: str


class ImageDeleteResponseDTO(BaseModel):
    removed: bool
