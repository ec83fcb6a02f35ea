"""Pydantic request/response models for car endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import Car, Condition, Details, Location, Manufacturer


class ManufacturerModel(BaseModel):
    code: int
    name: str = Field(..., min_length=1)


class DetailsModel(BaseModel):
    body: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    manufacturer: ManufacturerModel
    numberOfDoors: Optional[int] = Field(None, ge=1)
    fuelType: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = Field(None, ge=0)
    modelYear: Optional[int] = None
    productionYear: Optional[int] = None
    externalColor: Optional[str] = None

    def to_domain(self) -> Details:
        return Details(
            body=self.body,
            model=self.model,
            manufacturer=Manufacturer(code=self.manufacturer.code, name=self.manufacturer.name),
            number_of_doors=self.numberOfDoors,
            fuel_type=self.fuelType,
            engine=self.engine,
            mileage=self.mileage,
            model_year=self.modelYear,
            production_year=self.productionYear,
            external_color=self.externalColor,
        )

    @classmethod
    def from_domain(cls, details: Details) -> "DetailsModel":
        return cls(
            body=details.body,
            model=details.model,
            manufacturer=ManufacturerModel(code=details.manufacturer.code, name=details.manufacturer.name),
            numberOfDoors=details.number_of_doors,
            fuelType=details.fuel_type,
            engine=details.engine,
            mileage=details.mileage,
            modelYear=details.model_year,
            productionYear=details.production_year,
            externalColor=details.external_color,
        )


class LocationModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class CarRequest(BaseModel):
    """Body for POST/PUT. ``price`` is accepted but never stored."""

    id: Optional[int] = None
    condition: Condition
    details: DetailsModel
    location: LocationModel
    price: Optional[str] = None

    def to_domain(self) -> Car:
        return Car(
            id=self.id,
            condition=self.condition,
            details=self.details.to_domain(),
            # address fields are derived; only coordinates come from the client
            location=Location(lat=self.location.lat, lon=self.location.lon),
            price=self.price,
        )


class LinkModel(BaseModel):
    href: str


class CarResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int]
    condition: Condition
    details: DetailsModel
    location: LocationModel
    price: Optional[str] = None
    createdAt: Optional[datetime] = None
    links: Dict[str, LinkModel] = Field(default_factory=dict, alias="_links")

    @classmethod
    def from_domain(cls, car: Car, *, self_href: str, collection_href: str) -> "CarResource":
        return cls(
            id=car.id,
            condition=car.condition,
            details=DetailsModel.from_domain(car.details),
            location=LocationModel(
                lat=car.location.lat,
                lon=car.location.lon,
                address=car.location.address,
                city=car.location.city,
                state=car.location.state,
                zip=car.location.zip,
            ),
            price=car.price,
            createdAt=car.created_at,
            links={"self": LinkModel(href=self_href), "cars": LinkModel(href=collection_href)},
        )


class CarCollectionResource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    embedded: Dict[str, List[CarResource]] = Field(default_factory=dict, alias="_embedded")
    links: Dict[str, LinkModel] = Field(default_factory=dict, alias="_links")
