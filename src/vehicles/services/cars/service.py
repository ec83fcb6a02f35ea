"""Car service: persisted cars enriched with live price and address lookups."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from contextlib import contextmanager
from typing import Iterator, List, Protocol

from ...config import settings
from ...models.domain import Car, Location
from ...persistence.repository import CarRepository
from .results import ServiceResult

logger = logging.getLogger(__name__)


class PriceLookup(Protocol):
    """Anything that can quote a display price for a vehicle id."""

    def get_price(self, vehicle_id: int) -> str: ...


class AddressLookup(Protocol):
    """Anything that can resolve coordinates into an addressed Location."""

    def get_address(self, location: Location) -> Location: ...


class CarService:
    """Create, read, update and delete cars.

    Reads always enrich cars with a freshly fetched price and address. Lookup
    failures are not caught here: they abort the whole operation. A missing id is
    reported as a ``NOT_FOUND`` result rather than raised.
    """

    def __init__(
        self,
        repository: CarRepository,
        price_client: PriceLookup,
        maps_client: AddressLookup,
        *,
        max_workers: int | None = None,
    ) -> None:
        self.repository = repository
        self.price_client = price_client
        self.maps_client = maps_client
        self.max_workers = max_workers if max_workers is not None else settings.enrichment_max_workers
        # car id -> [lock, number of callers holding or waiting on it]
        self._locks: dict[int, list] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _locked(self, car_id: int) -> Iterator[None]:
        """Serialize writers on one car id; the entry is dropped once nobody uses it."""
        with self._locks_guard:
            entry = self._locks.get(car_id)
            if entry is None:
                entry = self._locks[car_id] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[car_id]

    def _enrich(self, car: Car) -> Car:
        # price first, then address
        car.price = self.price_client.get_price(car.id)
        car.location = self.maps_client.get_address(car.location)
        return car

    def list(self) -> ServiceResult[List[Car]]:
        """All stored cars in store order, each with price and address filled in."""
        cars = self.repository.find_all()
        workers = min(self.max_workers, len(cars))
        if workers <= 1:
            for car in cars:
                self._enrich(car)
            return ServiceResult.success(cars)

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich")
        try:
            futures = [executor.submit(self._enrich, car) for car in cars]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            for future in futures:
                if future in done and future.exception() is not None:
                    # re-raises the lookup failure; no partial list is returned
                    future.result()
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
        return ServiceResult.success(cars)

    def find_by_id(self, car_id: int) -> ServiceResult[Car]:
        car = self.repository.find_by_id(car_id)
        if car is None:
            return ServiceResult.not_found(car_id)
        return ServiceResult.success(self._enrich(car))

    def save(self, car: Car) -> ServiceResult[Car]:
        """Create a car (no id) or merge onto the stored car with the same id.

        A merge replaces details, location, condition and price and keeps every
        other stored attribute. Nothing is enriched here.
        """
        if car.id is None:
            saved = self.repository.save(car)
            logger.info(f"Created car {saved.id}")
            return ServiceResult.success(saved)

        with self._locked(car.id):
            stored = self.repository.find_by_id(car.id)
            if stored is None:
                return ServiceResult.not_found(car.id)
            stored.details = car.details
            stored.location = car.location
            stored.condition = car.condition
            stored.price = car.price
            saved = self.repository.save(stored)
        # the store never keeps price, hand the caller back what it sent
        saved.price = car.price
        logger.info(f"Updated car {saved.id}")
        return ServiceResult.success(saved)

    def delete(self, car_id: int) -> ServiceResult[None]:
        with self._locked(car_id):
            car = self.repository.find_by_id(car_id)
            if car is None:
                return ServiceResult.not_found(car_id)
            self.repository.delete(car)
        logger.info(f"Deleted car {car_id}")
        return ServiceResult.success()
