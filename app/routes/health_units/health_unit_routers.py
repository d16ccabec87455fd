from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path

from app.core.security import require_admin
from app.schemas.common.camel_model import INT32_MAX, INT32_MIN
from app.models.health_unit_db.seed_health_units import seed_health_units
from app.schemas.health_units.health_unit_base import (
    HealthUnitCreate,
    HealthUnitOut,
    HealthUnitUpdate,
    SeedOut,
    SuccessOut,
)
from app.services.health_unit_types import HealthUnitCategory
from app.services.health_units import HealthUnitStore, get_health_unit_store

health_unit_router = APIRouter(prefix="/health-units", tags=["Health Units"])


@health_unit_router.get("/", response_model=List[HealthUnitOut])
def list_health_units(store: HealthUnitStore = Depends(get_health_unit_store)):
    return store.list_all()


@health_unit_router.get("/category/{category}", response_model=List[HealthUnitOut])
def list_health_units_by_category(
    category: HealthUnitCategory,
    store: HealthUnitStore = Depends(get_health_unit_store),
):
    return store.list_by_category(category)


@health_unit_router.post(
    "/seed",
    response_model=SeedOut,
    dependencies=[Depends(require_admin("Only administrators can seed the database"))],
)
def seed_health_units_route(store: HealthUnitStore = Depends(get_health_unit_store)):
    count = seed_health_units(store)
    return SeedOut(success=True, count=count)


@health_unit_router.get("/{unit_id}", response_model=Optional[HealthUnitOut])
def get_health_unit(
    unit_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    store: HealthUnitStore = Depends(get_health_unit_store),
):
    return store.get_by_id(unit_id)


@health_unit_router.post(
    "/",
    response_model=HealthUnitOut,
    dependencies=[Depends(require_admin("Only administrators can create health units"))],
)
def create_health_unit(
    unit: HealthUnitCreate,
    store: HealthUnitStore = Depends(get_health_unit_store),
):
    return store.create(unit.model_dump())


@health_unit_router.put(
    "/{unit_id}",
    response_model=HealthUnitOut,
    dependencies=[Depends(require_admin("Only administrators can update health units"))],
)
def edit_health_unit(
    unit_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    updates: HealthUnitUpdate = Body(...),
    store: HealthUnitStore = Depends(get_health_unit_store),
):
    return store.update(unit_id, updates.model_dump(exclude_unset=True))


@health_unit_router.delete(
    "/{unit_id}",
    response_model=SuccessOut,
    dependencies=[Depends(require_admin("Only administrators can delete health units"))],
)
def delete_health_unit(
    unit_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    store: HealthUnitStore = Depends(get_health_unit_store),
):
    store.delete(unit_id)
    return SuccessOut(success=True)
