"""Domain models for vehicle records."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional


class Condition(str, Enum):
    NEW = "NEW"
    USED = "USED"


@dataclass(slots=True)
class Manufacturer:
    code: int
    name: str


@dataclass(slots=True)
class Details:
    """Descriptive attributes of a car. Copied wholesale on update."""

    body: str
    model: str
    manufacturer: Manufacturer
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None


@dataclass(slots=True)
class Location:
    """Coordinate pair plus the address fields resolved by the maps service."""

    lat: float
    lon: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    def coordinates_only(self) -> "Location":
        return Location(lat=self.lat, lon=self.lon)


@dataclass(slots=True)
class Car:
    """A vehicle record.

    ``price`` and the address fields of ``location`` are derived at read time and
    are never persisted. ``id`` is ``None`` until the store assigns one.
    """

    condition: Condition
    details: Details
    location: Location
    id: Optional[int] = None
    price: Optional[str] = None
    created_at: Optional[datetime] = None

    def durable_copy(self) -> "Car":
        """Copy of the car carrying only the fields a store persists."""
        return replace(
            self,
            details=replace(self.details, manufacturer=replace(self.details.manufacturer)),
            location=self.location.coordinates_only(),
            price=None,
        )
