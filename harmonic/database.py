import logging
from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from harmonic.core import config

logger = logging.getLogger(__name__)

Base = declarative_base()


class StorageError(Exception):
    """Raised when the database rejects or fails an operation."""


def build_engine(url: str, echo: bool = False) -> Engine:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url == "sqlite://":
            # One shared connection so every session sees the same in-memory database.
            options["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **options)
    return create_engine(url, echo=echo, pool_pre_ping=True)


class Database:
    """Storage client owned by the application and handed to each request."""

    def __init__(self, url: str | None = None, echo: bool | None = None, engine: Engine | None = None):
        self.url = url or config.DATABASE_URL
        self.engine = engine or build_engine(self.url, config.DATABASE_ECHO if echo is None else echo)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_schema(self) -> None:
        # Importing the models registers their tables on Base.metadata.
        from harmonic.models import course_class, enrollment, selection, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.engine.url.render_as_string(hide_password=True))

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
