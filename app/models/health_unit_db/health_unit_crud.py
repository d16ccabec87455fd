from datetime import timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.database import utcnow
from app.models.health_unit_db.health_unit_db import HealthUnit
from app.services.health_unit_types import HealthUnitCategory


def get_all_health_units(db: Session) -> List[HealthUnit]:
    return db.query(HealthUnit).order_by(HealthUnit.id).all()


def get_health_units_by_category(db: Session, category: HealthUnitCategory) -> List[HealthUnit]:
    return (
        db.query(HealthUnit)
        .filter(HealthUnit.category == category)
        .order_by(HealthUnit.id)
        .all()
    )


def get_health_unit_by_id(db: Session, unit_id: int) -> Optional[HealthUnit]:
    return db.query(HealthUnit).filter(HealthUnit.id == unit_id).first()


def insert_health_unit(db: Session, fields: Dict[str, Any]) -> int:
    now = utcnow()
    db_unit = HealthUnit(**fields, created_at=now, updated_at=now)
    db.add(db_unit)
    db.commit()
    return db_unit.id


def update_health_unit_fields(db: Session, unit_id: int, fields: Dict[str, Any]) -> int:
    """Write only ``fields`` on the row and refresh ``updated_at``.

    Returns the number of rows matched.
    """
    current = (
        db.query(HealthUnit.updated_at).filter(HealthUnit.id == unit_id).scalar()
    )
    if current is None:
        return 0

    # updated_at must move forward even when the clock has not ticked
    now = utcnow()
    if now <= current:
        now = current + timedelta(microseconds=1)

    values = dict(fields, updated_at=now)
    matched = (
        db.query(HealthUnit)
        .filter(HealthUnit.id == unit_id)
        .update(values, synchronize_session=False)
    )
    db.commit()
    return matched


def delete_health_unit_row(db: Session, unit_id: int) -> int:
    deleted = (
        db.query(HealthUnit)
        .filter(HealthUnit.id == unit_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
