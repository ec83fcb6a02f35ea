"""In-memory price store."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

CENT = Decimal("0.01")


@dataclass(slots=True)
class Price:
    currency: str
    price: Decimal
    vehicle_id: int


def generate_prices(
    vehicle_ids: Iterable[int],
    *,
    currency: str,
    min_price: float,
    max_price: float,
    seed: int,
) -> list[Price]:
    """Deterministic prices between ``min_price`` and ``max_price``, rounded to cents."""
    if min_price > max_price:
        raise ValueError("min_price must not exceed max_price")
    rng = random.Random(seed)
    return [
        Price(
            currency=currency,
            price=Decimal(str(rng.uniform(min_price, max_price))).quantize(CENT, rounding=ROUND_HALF_UP),
            vehicle_id=vehicle_id,
        )
        for vehicle_id in vehicle_ids
    ]


class PriceRepository:
    def __init__(self, prices: Iterable[Price] = ()) -> None:
        self._lock = threading.Lock()
        self._prices: dict[int, Price] = {price.vehicle_id: price for price in prices}

    def find_all(self) -> list[Price]:
        with self._lock:
            return [self._prices[key] for key in sorted(self._prices)]

    def find_by_vehicle_id(self, vehicle_id: int) -> Price | None:
        with self._lock:
            return self._prices.get(vehicle_id)

    def save(self, price: Price, *, replace: bool = True) -> Price | None:
        """Store ``price`` under its vehicle id.

        With ``replace=False`` an existing entry is left untouched and ``None`` is
        returned, so create-only callers can detect the conflict.
        """
        with self._lock:
            if not replace and price.vehicle_id in self._prices:
                return None
            self._prices[price.vehicle_id] = price
            return price

    def delete(self, vehicle_id: int) -> bool:
        with self._lock:
            return self._prices.pop(vehicle_id, None) is not None
