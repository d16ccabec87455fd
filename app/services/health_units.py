"""Record store for health units.

Every write is followed by a read of the same row by id, and the read-back
snapshot is what gets returned. A write whose read-back finds nothing is
reported as ``CreateFailed``/``UpdateFailed``.
"""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import Depends

from app.core.database import Database, get_database
from app.core.errors import CreateFailed, StoreUnavailable, UpdateFailed
from app.models.health_unit_db.health_unit_crud import (
    delete_health_unit_row,
    get_all_health_units,
    get_health_unit_by_id,
    get_health_units_by_category,
    insert_health_unit,
    update_health_unit_fields,
)
from app.models.health_unit_db.health_unit_db import HealthUnit
from app.services.health_unit_types import HealthUnitCategory

log = structlog.get_logger(__name__)


class HealthUnitStore:
    def __init__(self, database: Database):
        self.database = database

    def list_all(self) -> List[HealthUnit]:
        try:
            with self.database.session() as db:
                return get_all_health_units(db)
        except StoreUnavailable:
            log.warning("health_units_list_unavailable")
            return []

    def list_by_category(self, category: HealthUnitCategory) -> List[HealthUnit]:
        try:
            with self.database.session() as db:
                return get_health_units_by_category(db, category)
        except StoreUnavailable:
            log.warning("health_units_list_unavailable", category=category.value)
            return []

    def get_by_id(self, unit_id: int) -> Optional[HealthUnit]:
        try:
            with self.database.session() as db:
                return get_health_unit_by_id(db, unit_id)
        except StoreUnavailable:
            log.warning("health_unit_get_unavailable", unit_id=unit_id)
            return None

    def create(self, fields: Dict[str, Any]) -> HealthUnit:
        with self.database.session() as db:
            unit_id = insert_health_unit(db, fields)
            db.expire_all()
            created = get_health_unit_by_id(db, unit_id)
        if not created:
            raise CreateFailed()
        log.info("health_unit_created", unit_id=created.id, name=created.name)
        return created

    def update(self, unit_id: int, fields: Dict[str, Any]) -> HealthUnit:
        with self.database.session() as db:
            update_health_unit_fields(db, unit_id, fields)
            updated = get_health_unit_by_id(db, unit_id)
        if not updated:
            raise UpdateFailed()
        log.info("health_unit_updated", unit_id=unit_id, fields=sorted(fields))
        return updated

    def delete(self, unit_id: int):
        with self.database.session() as db:
            deleted = delete_health_unit_row(db, unit_id)
        log.info("health_unit_deleted", unit_id=unit_id, deleted=deleted)


def get_health_unit_store(database: Database = Depends(get_database)) -> HealthUnitStore:
    return HealthUnitStore(database)
