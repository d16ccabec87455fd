from sqlalchemy import Column, DateTime, Enum, Integer, String, Text

from app.core.database import Base, utcnow
from app.services.health_unit_types import HealthUnitCategory, OccupancyLevel


class HealthUnit(Base):
    __tablename__ = "health_units"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(
        Enum(HealthUnitCategory, name="health_unit_category", native_enum=False),
        nullable=False,
        index=True,
    )
    address = Column(Text, nullable=False)
    # Coordenadas guardadas como texto livre, sem validação numérica
    latitude = Column(String(50), nullable=False)
    longitude = Column(String(50), nullable=False)
    phone = Column(String(20), nullable=True)
    occupancy_level = Column(
        Enum(OccupancyLevel, name="occupancy_level", native_enum=False),
        nullable=False,
        default=OccupancyLevel.medium,
    )
    average_wait_time = Column(Integer, nullable=False, default=30)  # minutos
    waiting_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
