import pytest

from app.core.database import Database
from app.core.errors import CreateFailed, StoreUnavailable, UpdateFailed
from app.services import health_units
from app.services.health_unit_types import HealthUnitCategory, OccupancyLevel
from app.services.health_units import HealthUnitStore

FIELDS = {
    "name": "UBS Vila Nova",
    "category": HealthUnitCategory.ubs,
    "address": "Rua Nova, 250",
    "latitude": "-23.570520",
    "longitude": "-46.653308",
    "occupancy_level": OccupancyLevel.critical,
    "average_wait_time": 120,
    "waiting_count": 50,
}


def test_create_returns_read_back_row(store):
    unit = store.create(dict(FIELDS))

    assert unit.id is not None
    assert unit.name == "UBS Vila Nova"
    assert unit.occupancy_level == OccupancyLevel.critical
    assert unit.created_at == unit.updated_at
    assert store.get_by_id(unit.id).address == "Rua Nova, 250"


def test_create_allows_duplicates(store):
    first = store.create(dict(FIELDS))
    second = store.create(dict(FIELDS))
    assert first.id != second.id
    assert len(store.list_all()) == 2


def test_update_refreshes_updated_at(store):
    unit = store.create(dict(FIELDS))
    updated = store.update(unit.id, {"occupancy_level": OccupancyLevel.low})

    assert updated.occupancy_level == OccupancyLevel.low
    assert updated.waiting_count == 50
    assert updated.created_at == unit.created_at
    assert updated.updated_at > unit.updated_at


def test_update_with_no_fields_still_moves_updated_at(store):
    unit = store.create(dict(FIELDS))
    updated = store.update(unit.id, {})
    assert updated.name == unit.name
    assert updated.updated_at > unit.updated_at


def test_update_missing_row_raises(store):
    with pytest.raises(UpdateFailed):
        store.update(404, {"name": "Nada"})


def test_create_raises_when_read_back_is_empty(store, monkeypatch):
    monkeypatch.setattr(health_units, "get_health_unit_by_id", lambda db, unit_id: None)
    with pytest.raises(CreateFailed):
        store.create(dict(FIELDS))


def test_delete_is_silent_for_missing_row(store):
    unit = store.create(dict(FIELDS))
    store.delete(unit.id)
    store.delete(unit.id)
    assert store.get_by_id(unit.id) is None


def test_unavailable_store_reads_empty(unavailable_database):
    store = HealthUnitStore(unavailable_database)

    assert store.list_all() == []
    assert store.list_by_category(HealthUnitCategory.hospital) == []
    assert store.get_by_id(1) is None


def test_unavailable_store_writes_raise(unavailable_database):
    store = HealthUnitStore(unavailable_database)

    with pytest.raises(StoreUnavailable):
        store.create(dict(FIELDS))
    with pytest.raises(StoreUnavailable):
        store.update(1, {"name": "X"})
    with pytest.raises(StoreUnavailable):
        store.delete(1)


def test_bad_database_url_is_unavailable():
    database = Database("nosuchdialect://localhost/db")
    assert database.available is False
    with pytest.raises(StoreUnavailable):
        with database.session():
            pass


def test_database_connects_lazily():
    lazy = Database("sqlite://")
    assert lazy._engine is None
    assert lazy.available is True
    assert lazy._engine is not None
