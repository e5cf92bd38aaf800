# payroll_app/database.py
import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Owns the engine (bounded connection pool) and the session factory.

    Constructed once by the application factory, initialised on startup and
    disposed on shutdown. Pass ``engine`` to reuse an engine built elsewhere
    (the test-suite hands in an in-memory SQLite engine).
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        pool_size: int = 10,
        echo: bool = False,
        engine: Optional[Engine] = None,
    ):
        if url is None and engine is None:
            raise ValueError("Database needs either a url or an engine")
        self.url = url
        self.pool_size = pool_size
        self.echo = echo
        self._engine = engine
        self._sessionmaker: Optional[sessionmaker] = None

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(settings.sqlalchemy_url, pool_size=settings.db_pool_size, echo=settings.db_echo)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not initialised; call init() first")
        return self._engine

    def init(self) -> None:
        if self._engine is None:
            self._engine = create_engine(
                self.url,
                echo=self.echo,
                pool_size=self.pool_size,
                max_overflow=0,
                pool_pre_ping=True,
            )
        if self._sessionmaker is None:
            self._sessionmaker = sessionmaker(
                bind=self._engine, autocommit=False, autoflush=False, expire_on_commit=False
            )

    def create_tables(self) -> None:
        # import every model module so the metadata is complete
        from payroll_app import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        if self._sessionmaker is None:
            self.init()
        return self._sessionmaker()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")


# Dependency: one Session per request, rolled back if the handler blew up
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()
