from dataclasses import replace
from datetime import datetime, timezone

from vehicles.models.domain import Car, Condition, Details, Location, Manufacturer
from vehicles.persistence.repository import (
    InMemoryCarRepository,
    SupabaseCarRepository,
    car_to_row,
    row_to_car,
)


def _car(**overrides) -> Car:
    car = Car(
        condition=Condition.NEW,
        details=Details(body="suv", model="Tahoe", manufacturer=Manufacturer(code=101, name="Chevrolet")),
        location=Location(lat=40.7, lon=-73.9),
    )
    return replace(car, **overrides)


def test_in_memory_save_assigns_ids_and_created_at():
    repository = InMemoryCarRepository()

    first = repository.save(_car())
    second = repository.save(_car())

    assert (first.id, second.id) == (1, 2)
    assert first.created_at is not None
    assert [car.id for car in repository.find_all()] == [1, 2]


def test_in_memory_store_drops_derived_fields():
    repository = InMemoryCarRepository()

    saved = repository.save(
        _car(price="$5.00", location=Location(lat=1.0, lon=2.0, address="Somewhere", city="X"))
    )

    assert saved.price is None
    assert saved.location == Location(lat=1.0, lon=2.0)


def test_in_memory_returned_cars_are_copies():
    repository = InMemoryCarRepository()
    saved = repository.save(_car())

    fetched = repository.find_by_id(saved.id)
    fetched.details.model = "changed"
    fetched.price = "$1"

    again = repository.find_by_id(saved.id)
    assert again.details.model == "Tahoe"
    assert again.price is None


def test_in_memory_delete():
    repository = InMemoryCarRepository()
    saved = repository.save(_car())

    repository.delete(saved)

    assert repository.find_by_id(saved.id) is None
    assert len(repository) == 0


def test_row_mapping_keeps_durable_fields_only():
    created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    car = _car(id=9, price="$9", created_at=created, location=Location(lat=1.5, lon=2.5, address="A"))

    row = car_to_row(car)

    assert "price" not in row and "address" not in row and "id" not in row
    assert row["details"]["manufacturer"] == {"code": 101, "name": "Chevrolet"}
    restored = row_to_car({**row, "id": 9, "created_at": "2024-01-02T03:04:05Z"})
    assert restored == replace(car, price=None, location=Location(lat=1.5, lon=2.5))


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Records the supabase query chain and answers from an in-memory table."""

    def __init__(self, table):
        self.table = table
        self.action = "select"
        self.payload = None
        self.filters = {}

    def select(self, *_):
        self.action = "select"
        return self

    def insert(self, payload):
        self.action, self.payload = "insert", payload
        return self

    def update(self, payload):
        self.action, self.payload = "update", payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def order(self, *_):
        return self

    def limit(self, *_):
        return self

    def execute(self):
        rows = self.table.rows
        matches = [row for row in rows if all(row.get(k) == v for k, v in self.filters.items())]
        if self.action == "insert":
            self.table.next_id += 1
            row = {**self.payload, "id": self.table.next_id}
            rows.append(row)
            return FakeResponse([row])
        if self.action == "update":
            for row in matches:
                row.update(self.payload)
            return FakeResponse(matches)
        if self.action == "delete":
            self.table.rows = [row for row in rows if row not in matches]
            return FakeResponse(matches)
        return FakeResponse(sorted(matches, key=lambda row: row["id"]))


class FakeTable:
    def __init__(self):
        self.rows = []
        self.next_id = 0


class FakeSupabase:
    def __init__(self):
        self.tables = {}

    def table(self, name):
        return FakeQuery(self.tables.setdefault(name, FakeTable()))


def test_supabase_repository_round_trip():
    client = FakeSupabase()
    repository = SupabaseCarRepository(client, table="cars")

    created = repository.save(_car(price="$3"))
    assert created.id == 1
    assert created.created_at is not None

    updated = repository.save(replace(created, condition=Condition.USED))
    assert updated.condition is Condition.USED
    assert updated.created_at == created.created_at
    assert [car.id for car in repository.find_all()] == [1]

    repository.delete(updated)
    assert repository.find_by_id(1) is None
