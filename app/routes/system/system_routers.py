from fastapi import APIRouter, Depends

from app.core.database import Database, get_database

system_router = APIRouter(prefix="/system", tags=["System"])


@system_router.get("/health")
def health(database: Database = Depends(get_database)):
    return {
        "status": "ok",
        "database": "available" if database.available else "unavailable",
    }
