from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator

from app.schemas.common.camel_model import CamelModel, DbInt
from app.services.health_unit_types import HealthUnitCategory, OccupancyLevel


class HealthUnitCreate(CamelModel):
    name: StrictStr
    category: HealthUnitCategory
    address: StrictStr
    latitude: StrictStr
    longitude: StrictStr
    phone: Optional[StrictStr] = None
    occupancy_level: OccupancyLevel = OccupancyLevel.medium
    average_wait_time: DbInt = 30
    waiting_count: DbInt = 0


class HealthUnitUpdate(CamelModel):
    name: Optional[StrictStr] = None
    category: Optional[HealthUnitCategory] = None
    address: Optional[StrictStr] = None
    latitude: Optional[StrictStr] = None
    longitude: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    occupancy_level: Optional[OccupancyLevel] = None
    average_wait_time: Optional[DbInt] = None
    waiting_count: Optional[DbInt] = None

    @field_validator(
        "name",
        "category",
        "address",
        "latitude",
        "longitude",
        "occupancy_level",
        "average_wait_time",
        "waiting_count",
    )
    @classmethod
    def not_null(cls, value):
        # Só o telefone pode ser apagado com null
        if value is None:
            raise ValueError("field may not be null")
        return value


class HealthUnitOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: HealthUnitCategory
    address: str
    latitude: str
    longitude: str
    phone: Optional[str] = None
    occupancy_level: OccupancyLevel
    average_wait_time: int
    waiting_count: int
    created_at: datetime
    updated_at: datetime


class SuccessOut(BaseModel):
    success: bool = True


class SeedOut(SuccessOut):
    count: int
