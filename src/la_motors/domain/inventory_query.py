"""
Inventory query pipeline.

Pure transform from (vehicles, criteria) to the ordered sequence the gallery
shows. All filters combine with AND semantics, then exactly one stable sort is
applied so ties keep their input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Iterable, Sequence

from la_motors.domain.vehicle import Vehicle

ALL = "all"

FIFTY_MILLION = 50_000_000
ONE_HUNDRED_MILLION = 100_000_000


class PriceBand(StrEnum):
    ALL = "all"
    UNDER_50M = "under-50m"
    FROM_50M_TO_100M = "50m-100m"
    OVER_100M = "over-100m"

    def contains(self, price: int) -> bool:
        if self is PriceBand.UNDER_50M:
            return price < FIFTY_MILLION
        if self is PriceBand.FROM_50M_TO_100M:
            return FIFTY_MILLION <= price < ONE_HUNDRED_MILLION
        if self is PriceBand.OVER_100M:
            return price >= ONE_HUNDRED_MILLION
        return True


class SortKey(StrEnum):
    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    YEAR_NEW = "year-new"
    YEAR_OLD = "year-old"
    MILEAGE_LOW = "mileage-low"


@dataclass(frozen=True, slots=True)
class InventoryCriteria:
    term: str = ""
    make: str = ALL
    fuel_type: str = ALL
    price_band: PriceBand = PriceBand.ALL
    sort: SortKey = SortKey.NEWEST


@dataclass(frozen=True, slots=True)
class InventoryFacets:
    """Filter options derived from the full collection, never from filtered results."""

    makes: list[str]
    fuel_types: list[str]


def _created_at_key(vehicle: Vehicle) -> float:
    if vehicle.created_at is None:
        return float("-inf")
    return vehicle.created_at.timestamp()


# sort key -> (key function, descending)
_ORDERINGS: dict[SortKey, tuple[Callable[[Vehicle], float], bool]] = {
    SortKey.NEWEST: (_created_at_key, True),
    SortKey.PRICE_LOW: (lambda v: v.price, False),
    SortKey.PRICE_HIGH: (lambda v: v.price, True),
    SortKey.YEAR_NEW: (lambda v: v.year, True),
    SortKey.YEAR_OLD: (lambda v: v.year, False),
    SortKey.MILEAGE_LOW: (lambda v: v.mileage, False),
}


def matches_term(vehicle: Vehicle, term: str) -> bool:
    """Case-insensitive substring match against make, model and year."""
    needle = term.lower()
    return (
        needle in vehicle.make.lower()
        or needle in vehicle.model.lower()
        or needle in str(vehicle.year)
    )


def matches(vehicle: Vehicle, criteria: InventoryCriteria) -> bool:
    if criteria.term and not matches_term(vehicle, criteria.term):
        return False
    if criteria.make != ALL and vehicle.make != criteria.make:
        return False
    if criteria.fuel_type != ALL and vehicle.fuel_type != criteria.fuel_type:
        return False
    return criteria.price_band.contains(vehicle.price)


def sort_vehicles(vehicles: Iterable[Vehicle], sort: SortKey) -> list[Vehicle]:
    key, descending = _ORDERINGS[sort]
    # sorted() is stable in both directions
    return sorted(vehicles, key=key, reverse=descending)


def apply_criteria(
    vehicles: Sequence[Vehicle], criteria: InventoryCriteria
) -> list[Vehicle]:
    """
    Filter and order vehicles for display.

    Args:
        vehicles: Source collection (not modified)
        criteria: Term, facet filters, price band and sort key

    Returns:
        New list with the matching vehicles in display order
    """
    return sort_vehicles(
        (vehicle for vehicle in vehicles if matches(vehicle, criteria)),
        criteria.sort,
    )


def derive_facets(vehicles: Iterable[Vehicle]) -> InventoryFacets:
    makes: set[str] = set()
    fuel_types: set[str] = set()
    for vehicle in vehicles:
        makes.add(vehicle.make)
        if vehicle.fuel_type:
            fuel_types.add(str(vehicle.fuel_type))
    return InventoryFacets(makes=sorted(makes), fuel_types=sorted(fuel_types))


def count_active_criteria(criteria: InventoryCriteria) -> int:
    """Number of criteria that differ from the defaults (for the filter badge)."""
    return sum(
        [
            bool(criteria.term),
            criteria.sort != SortKey.NEWEST,
            criteria.make != ALL,
            criteria.fuel_type != ALL,
            criteria.price_band != PriceBand.ALL,
        ]
    )
