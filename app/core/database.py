from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings
from app.core.errors import StoreUnavailable

log = structlog.get_logger(__name__)

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Database:
    """Lazily connected persistence client.

    The engine is created on first use and reused for the lifetime of the
    process. A missing URL or a failed engine creation leaves the client
    unavailable: ``session()`` then raises ``StoreUnavailable``.
    """

    def __init__(self, url: Optional[str], echo: bool = False, **engine_options):
        self.url = url
        self.echo = echo
        self.engine_options = engine_options
        self._engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None
        self._failed = False

    def _connect(self) -> Optional[sessionmaker]:
        if self._sessionmaker is not None or self._failed or not self.url:
            return self._sessionmaker

        options = dict(self.engine_options)
        if self.url.startswith("sqlite"):
            options.setdefault("connect_args", {"check_same_thread": False})
        try:
            self._engine = create_engine(self.url, echo=self.echo, **options)
        except Exception as exc:
            log.warning("database_connect_failed", error=str(exc))
            self._failed = True
            return None

        self._sessionmaker = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self._engine
        )
        return self._sessionmaker

    @property
    def available(self) -> bool:
        return self._connect() is not None

    @property
    def engine(self) -> Engine:
        if not self.available:
            raise StoreUnavailable()
        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        factory = self._connect()
        if factory is None:
            raise StoreUnavailable()
        db = factory()
        try:
            yield db
        finally:
            db.close()

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        if self._engine is not None:
            self._engine.dispose()


database = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)


def get_database() -> Database:
    return database
