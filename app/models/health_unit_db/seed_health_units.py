import structlog
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import database
from app.core.errors import HealthUnitsError
from app.services.health_unit_types import HealthUnitCategory, OccupancyLevel
from app.services.health_units import HealthUnitStore

log = structlog.get_logger(__name__)


sample_health_units = [
    {
        "name": "UBS Central",
        "category": HealthUnitCategory.ubs,
        "address": "Rua Principal, 100 - Centro",
        "latitude": "-23.550520",
        "longitude": "-46.633308",
        "phone": "(11) 3333-1111",
        "occupancy_level": OccupancyLevel.low,
        "average_wait_time": 15,
        "waiting_count": 3,
    },
    {
        "name": "Posto de Saúde Jardim das Flores",
        "category": HealthUnitCategory.posto,
        "address": "Av. das Flores, 500 - Jardim das Flores",
        "latitude": "-23.560520",
        "longitude": "-46.643308",
        "phone": "(11) 3333-2222",
        "occupancy_level": OccupancyLevel.medium,
        "average_wait_time": 45,
        "waiting_count": 12,
    },
    {
        "name": "Hospital Municipal",
        "category": HealthUnitCategory.hospital,
        "address": "Rua da Saúde, 1000 - Vila Médica",
        "latitude": "-23.540520",
        "longitude": "-46.623308",
        "phone": "(11) 3333-3333",
        "occupancy_level": OccupancyLevel.high,
        "average_wait_time": 90,
        "waiting_count": 35,
    },
    {
        "name": "UBS Vila Nova",
        "category": HealthUnitCategory.ubs,
        "address": "Rua Nova, 250 - Vila Nova",
        "latitude": "-23.570520",
        "longitude": "-46.653308",
        "phone": "(11) 3333-4444",
        "occupancy_level": OccupancyLevel.critical,
        "average_wait_time": 120,
        "waiting_count": 50,
    },
    {
        "name": "Posto de Saúde Parque Verde",
        "category": HealthUnitCategory.posto,
        "address": "Av. Verde, 800 - Parque Verde",
        "latitude": "-23.530520",
        "longitude": "-46.613308",
        "phone": "(11) 3333-5555",
        "occupancy_level": OccupancyLevel.low,
        "average_wait_time": 20,
        "waiting_count": 5,
    },
]


def seed_health_units(store: HealthUnitStore) -> int:
    """Insert the sample units one by one and return how many succeeded.

    A failed insert is logged and skipped; the batch is not atomic and running
    it again creates duplicates.
    """
    created = 0
    for data in sample_health_units:
        try:
            store.create(dict(data))
        except (HealthUnitsError, SQLAlchemyError) as exc:
            log.info("health_unit_seed_skipped", name=data["name"], error=str(exc))
            continue
        created += 1

    log.info("health_units_seeded", count=created, total=len(sample_health_units))
    return created


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.logging import setup_logging

    setup_logging(settings.LOG_LEVEL)
    if database.available and settings.DB_AUTO_CREATE:
        database.create_all()
    seed_health_units(HealthUnitStore(database))
