#!/usr/bin/env python3
"""
Seed the vehicles table with deterministic random inventory.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: clears the table before seeding
- Goes through CreateVehicle, so seeded rows obey the same shaping as
  admin-created ones (trimmed text, generated VINs, default status)

Usage:
    python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from la_motors.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from la_motors.domain.vehicle import (
    Drivetrain,
    FuelType,
    Transmission,
    VehicleDraft,
    VehicleStatus,
)
from la_motors.infra.db.models.vehicle import VehicleRow
from la_motors.infra.db.session import get_session
from la_motors.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_VEHICLES = 30
CURRENT_YEAR = 2026


# ==============================================================================
# Costa Rican Market Data (prices in colones)
# ==============================================================================

MAKES = {
    "economy": {
        "makes": ["Hyundai", "Nissan", "Kia", "Suzuki"],
        "base_price": (6_000_000, 14_000_000),
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Mazda", "Ford"],
        "base_price": (10_000_000, 30_000_000),
    },
    "premium": {
        "makes": ["BMW", "Mercedes-Benz", "Audi", "Porsche"],
        "base_price": (40_000_000, 180_000_000),
    },
}

MODELS_BY_MAKE = {
    "Hyundai": ["Elantra", "Tucson", "Accent"],
    "Nissan": ["Rogue", "Sentra", "Frontier"],
    "Kia": ["Sportage", "Rio", "Sorento"],
    "Suzuki": ["Swift", "Vitara", "Jimny"],
    "Toyota": ["Corolla LE", "RAV4", "Hilux", "Prado"],
    "Honda": ["Civic", "CR-V", "HR-V"],
    "Mazda": ["Mazda3", "CX-5", "CX-30"],
    "Ford": ["EcoSport SE", "Ranger", "Explorer"],
    "BMW": ["M3 Competition", "X5", "330i"],
    "Mercedes-Benz": ["AMG GT 63 S", "GLC 300", "C 200"],
    "Audi": ["Q5", "A4", "e-tron"],
    "Porsche": ["Cayenne", "Macan", "911 Carrera"],
}

BODY_STYLES = ["Sedan", "SUV", "Hatchback", "Pick-up", "Coupe"]
COLORS = ["White", "Black", "Silver", "Gray", "Blue", "Red"]


# ==============================================================================
# Draft Generation
# ==============================================================================


def calculate_price(category: str, year: int) -> int:
    """Base price for the category, depreciated ~8% per year (max 60%), rounded to 10k."""
    low, high = MAKES[category]["base_price"]
    base = random.randint(low, high)
    depreciation = min(0.08 * max(0, CURRENT_YEAR - year), 0.60)
    return max(int(base * (1 - depreciation)) // 10_000 * 10_000, 1_000_000)


def generate_draft() -> VehicleDraft:
    category = random.choice(list(MAKES))
    make = random.choice(MAKES[category]["makes"])
    model = random.choice(MODELS_BY_MAKE[make])

    year = random.choices(
        range(2014, CURRENT_YEAR + 1),
        weights=[1, 1, 1, 2, 2, 3, 3, 4, 5, 6, 7, 8, 8],
        k=1,
    )[0]
    years_old = CURRENT_YEAR - year

    if year >= 2022:
        fuel_type = random.choices(list(FuelType), weights=[5, 1, 1, 2], k=1)[0]
    else:
        fuel_type = random.choices(list(FuelType), weights=[7, 3, 0, 1], k=1)[0]

    return VehicleDraft(
        make=make,
        model=model,
        year=year,
        price=calculate_price(category, year),
        mileage=random.randint(0, max(1_000, years_old * 18_000)),
        status=random.choices(list(VehicleStatus), weights=[8, 1, 1], k=1)[0],
        fuel_type=fuel_type,
        transmission=random.choices(list(Transmission), weights=[2, 6, 1], k=1)[0],
        drivetrain=random.choice(list(Drivetrain)),
        exterior_color=random.choice(COLORS),
        interior_color=random.choice(["Black leather", "Beige cloth", "Gray cloth"]),
        body_style=random.choice(BODY_STYLES),
        seating=random.choice([2, 5, 5, 5, 7]),
        doors=random.choice([2, 4, 4, 5]),
        images=[],
        features=random.sample(
            ["Backup camera", "Apple CarPlay", "Sunroof", "Heated seats", "Blind spot monitor"],
            k=random.randint(0, 3),
        ),
    )


def seed_vehicles(num_vehicles: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)

    print(f"🌱 Seeding database with {num_vehicles} vehicles (seed={seed})...")

    with get_session() as session:
        deleted = session.execute(delete(VehicleRow)).rowcount
        print(f"🗑️  Deleted {deleted} existing vehicles")

        create_vehicle = CreateVehicle(PostgresVehicleRepository(session))
        vehicles = [
            create_vehicle.execute(CreateVehicleRequest(draft=generate_draft())).vehicle
            for _ in range(num_vehicles)
        ]

        print(f"✅ Successfully seeded {len(vehicles)} vehicles!")
        for i, vehicle in enumerate(vehicles[:5], 1):
            print(
                f"   {i}. {vehicle.year} {vehicle.make} {vehicle.model} - "
                f"₡{vehicle.price:,} ({vehicle.status}, VIN {vehicle.vin})"
            )
        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
