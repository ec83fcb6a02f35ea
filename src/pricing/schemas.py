"""Pricing request and response models."""

from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_validator

from .repository import Price


class PriceModel(BaseModel):
    currency: str
    price: Decimal
    vehicleId: int

    @classmethod
    def from_domain(cls, price: Price) -> "PriceModel":
        return cls(currency=price.currency, price=price.price, vehicleId=price.vehicle_id)


class PriceUpdateRequest(BaseModel):
    """Body of ``PUT /prices/{vehicle_id}``; the vehicle comes from the path."""

    currency: str = Field(..., pattern=r"^[A-Za-z]{3}$", description="ISO 4217 code, e.g. USD.")
    price: Decimal = Field(..., ge=0, decimal_places=2)

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()

    def to_domain(self, vehicle_id: int) -> Price:
        return Price(currency=self.currency, price=self.price, vehicle_id=vehicle_id)


class PriceCreateRequest(PriceUpdateRequest):
    vehicleId: int = Field(..., ge=1)


class PriceListResponse(BaseModel):
    items: List[PriceModel]
    total: int
