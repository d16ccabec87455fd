from enum import Enum


class HealthUnitCategory(str, Enum):
    ubs = "ubs"
    posto = "posto"
    hospital = "hospital"


class OccupancyLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"
