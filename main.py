from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from app.core.config import settings
from app.core.database import database
from app.core.errors import register_error_handlers
from app.core.logging import setup_logging
from app.routes.auth.auth_routers import auth_router
from app.routes.health_units.health_unit_routers import health_unit_router
from app.routes.system.system_routers import system_router

setup_logging(settings.LOG_LEVEL)
log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if database.available and settings.DB_AUTO_CREATE:
        database.create_all()
    log.info("app_started", database="available" if database.available else "unavailable")
    yield
    database.dispose()


app = FastAPI(title="Health Units Status API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(system_router)
app.include_router(auth_router)
app.include_router(health_unit_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Unidades de Saúde</title>
        </head>
        <body>
            <h1>Status das Unidades de Saúde</h1>
            <p>Confira a documentação da API <a href="/docs">aqui</a>.</p>
        </body>
    </html>
    """
