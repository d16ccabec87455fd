from sqlalchemy.exc import DataError

from app.services import health_units
from app.services.health_unit_types import HealthUnitCategory, OccupancyLevel


def _unit(**overrides):
    fields = {
        "name": "Unidade",
        "category": HealthUnitCategory.ubs,
        "address": "Rua A, 10",
        "latitude": "-23.55",
        "longitude": "-46.63",
    }
    fields.update(overrides)
    return fields


def test_list_empty(client):
    r = client.get("/health-units/")
    assert r.status_code == 200
    assert r.json() == []


def test_list_returns_all_units(client, store):
    store.create(_unit(name="A"))
    store.create(_unit(name="B", category=HealthUnitCategory.hospital))

    r = client.get("/health-units/")
    assert r.status_code == 200
    assert [u["name"] for u in r.json()] == ["A", "B"]


def test_list_by_category_filters(client, store):
    store.create(_unit(name="UBS 1"))
    store.create(_unit(name="Posto 1", category=HealthUnitCategory.posto))
    store.create(_unit(name="UBS 2"))

    ubs = client.get("/health-units/category/ubs").json()
    assert [u["name"] for u in ubs] == ["UBS 1", "UBS 2"]
    assert all(u["category"] == "ubs" for u in ubs)

    posto = client.get("/health-units/category/posto").json()
    assert [u["name"] for u in posto] == ["Posto 1"]

    assert client.get("/health-units/category/hospital").json() == []


def test_list_by_unknown_category_is_rejected(client):
    r = client.get("/health-units/category/clinic")
    assert r.status_code == 422
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_get_by_id(client, store):
    unit = store.create(_unit(phone="(11) 3333-1111"))

    r = client.get(f"/health-units/{unit.id}")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == unit.id
    assert body["phone"] == "(11) 3333-1111"
    assert body["occupancyLevel"] == OccupancyLevel.medium.value
    assert body["averageWaitTime"] == 30
    assert body["waitingCount"] == 0


def test_get_missing_id_returns_null(client):
    r = client.get("/health-units/999")
    assert r.status_code == 200
    assert r.json() is None


def test_reads_need_no_token(client, store):
    store.create(_unit())
    assert client.get("/health-units/").status_code == 200
    assert client.get("/health-units/category/ubs").status_code == 200


def test_get_out_of_range_id_is_rejected(client):
    r = client.get(f"/health-units/{2**70}")
    assert r.status_code == 422
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_database_error_is_enveloped(client, monkeypatch):
    def broken(db):
        raise DataError("SELECT 1", {}, Exception("value out of range"))

    monkeypatch.setattr(health_units, "get_all_health_units", broken)

    r = client.get("/health-units/")
    assert r.status_code == 500
    assert r.json() == {"code": "DATABASE_ERROR", "message": "Database operation failed"}
