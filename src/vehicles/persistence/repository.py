"""Car record stores: an in-memory map and a Supabase-backed table."""

from __future__ import annotations

import itertools
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import asdict, replace
from datetime import datetime, timezone
from typing import Any

from ..models.domain import Car, Condition, Details, Location, Manufacturer

logger = logging.getLogger(__name__)


class CarRepository(ABC):
    """Keyed store for cars with store-assigned identifiers.

    Implementations persist only durable fields: price and resolved address are
    never written and never returned.
    """

    @abstractmethod
    def find_all(self) -> list[Car]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, car_id: int) -> Car | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, car: Car) -> Car:
        """Insert when ``car.id`` is None (assigning an id), otherwise overwrite."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, car: Car) -> None:
        raise NotImplementedError


class InMemoryCarRepository(CarRepository):
    def __init__(self) -> None:
        self._rows: dict[int, Car] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_all(self) -> list[Car]:
        with self._lock:
            return [row.durable_copy() for _, row in sorted(self._rows.items())]

    def find_by_id(self, car_id: int) -> Car | None:
        with self._lock:
            row = self._rows.get(car_id)
            return row.durable_copy() if row else None

    def save(self, car: Car) -> Car:
        with self._lock:
            if car.id is None:
                # ids come from a counter, so a deleted id is never handed out again
                row = replace(car.durable_copy(), id=next(self._ids), created_at=datetime.now(timezone.utc))
            else:
                row = car.durable_copy()
            self._rows[row.id] = row
            return row.durable_copy()

    def delete(self, car: Car) -> None:
        with self._lock:
            self._rows.pop(car.id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)


def car_to_row(car: Car) -> dict[str, Any]:
    """Durable columns of a car as a table row (no id)."""
    details = asdict(car.details)
    row: dict[str, Any] = {
        "condition": car.condition.value,
        "details": details,
        "lat": car.location.lat,
        "lon": car.location.lon,
    }
    if car.created_at is not None:
        row["created_at"] = car.created_at.isoformat()
    return row


def row_to_car(row: dict[str, Any]) -> Car:
    details = dict(row.get("details") or {})
    manufacturer = details.pop("manufacturer", None) or {}
    created_at = row.get("created_at")
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    return Car(
        id=int(row["id"]),
        condition=Condition(row["condition"]),
        details=Details(manufacturer=Manufacturer(**manufacturer), **details),
        location=Location(lat=float(row["lat"]), lon=float(row["lon"])),
        created_at=created_at,
    )


class SupabaseCarRepository(CarRepository):
    """Cars stored in a Supabase table.

    Expected columns: ``id`` (identity), ``condition`` (text), ``details`` (jsonb),
    ``lat``/``lon`` (float8), ``created_at`` (timestamptz). Client errors propagate.
    """

    def __init__(self, client: Any, table: str = "cars") -> None:
        self.client = client
        self.table = table

    def _table(self):
        return self.client.table(self.table)

    def find_all(self) -> list[Car]:
        response = self._table().select("*").order("id").execute()
        return [row_to_car(row) for row in (response.data or [])]

    def find_by_id(self, car_id: int) -> Car | None:
        response = self._table().select("*").eq("id", car_id).limit(1).execute()
        rows = response.data or []
        return row_to_car(rows[0]) if rows else None

    def save(self, car: Car) -> Car:
        if car.id is None:
            row = car_to_row(replace(car, created_at=datetime.now(timezone.utc)))
            response = self._table().insert(row).execute()
        else:
            row = car_to_row(car)
            response = self._table().update(row).eq("id", car.id).execute()
        rows = response.data or []
        if not rows:
            raise RuntimeError(f"Supabase returned no row when saving car {car.id}")
        logger.debug(f"Saved car {rows[0].get('id')} to table '{self.table}'")
        return row_to_car(rows[0])

    def delete(self, car: Car) -> None:
        self._table().delete().eq("id", car.id).execute()
