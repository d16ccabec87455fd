from app.core.errors import CreateFailed
from app.models.health_unit_db.seed_health_units import sample_health_units, seed_health_units


def test_seed_as_admin(client, admin_headers, store):
    r = client.post("/health-units/seed", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"success": True, "count": 5}

    units = store.list_all()
    assert len(units) == 5
    assert {u.category.value for u in units} == {"ubs", "posto", "hospital"}
    assert {u.occupancy_level.value for u in units} == {"low", "medium", "high", "critical"}


def test_seed_twice_creates_duplicates(client, admin_headers, store):
    client.post("/health-units/seed", headers=admin_headers)
    r = client.post("/health-units/seed", headers=admin_headers)

    assert r.json() == {"success": True, "count": 5}
    assert len(store.list_all()) == 10


def test_seed_skips_failed_inserts(store, monkeypatch):
    create = store.create

    def flaky_create(fields):
        if fields["name"] == "Hospital Municipal":
            raise CreateFailed()
        return create(fields)

    monkeypatch.setattr(store, "create", flaky_create)

    assert seed_health_units(store) == len(sample_health_units) - 1
    assert "Hospital Municipal" not in [u.name for u in store.list_all()]


def test_seed_with_unavailable_store_counts_zero(unavailable_database):
    from app.services.health_units import HealthUnitStore

    assert seed_health_units(HealthUnitStore(unavailable_database)) == 0
