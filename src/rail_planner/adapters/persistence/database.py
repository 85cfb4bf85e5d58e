"""SQLAlchemy engine and session management."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rail_planner.adapters.persistence.orm_models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and hands out sessions for one database URL."""

    def __init__(self, url: str, echo: bool = False) -> None:
        """Create the engine.

        SQLite file databases get their parent directory created and run in
        WAL mode; in-memory SQLite shares a single connection so every
        session sees the same data. Foreign keys are enforced on SQLite.
        """
        self.url = make_url(url)
        engine_kwargs: dict[str, Any] = {"echo": echo}
        self._is_sqlite = self.url.get_backend_name() == "sqlite"
        self._in_memory = self._is_sqlite and self.url.database in (None, "", ":memory:")

        if self._is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self._in_memory:
                engine_kwargs["poolclass"] = StaticPool
            elif self.url.database:
                Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine: Engine = create_engine(self.url, **engine_kwargs)
        if self._is_sqlite:
            event.listen(self.engine, "connect", self._configure_sqlite_connection)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def _configure_sqlite_connection(self, dbapi_connection: Any, _record: Any) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys = ON")
            if not self._in_memory:
                cursor.execute("PRAGMA journal_mode = WAL")
        finally:
            cursor.close()

    def create_schema(self) -> None:
        """Create all tables and indexes that do not exist yet."""
        Base.metadata.create_all(self.engine)
        logger.info(f"Database initialized at {self.url.render_as_string(hide_password=True)}")

    def session(self) -> Session:
        """Return a new session; use it as a context manager."""
        return self._session_factory()

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()
        logger.info("Database connection closed.")
