import logging
import time
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    url = settings.sqlalchemy_database_url
    if url.startswith("sqlite"):
        # In-memory databases need a single shared connection
        return create_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=1800,
        pool_timeout=20,
        echo=False,
        connect_args={
            "connect_timeout": settings.db_connect_timeout,
            "application_name": "quiz_api"
        }
    )


class Database:
    """Engine plus session factory, owned by the application instance."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(build_engine(settings))

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def wait_until_ready(self, retry_delay: float, max_attempts: Optional[int] = None) -> int:
        """Block until the database answers, retrying with a fixed delay.

        Retries forever unless ``max_attempts`` is given. Returns the number
        of attempts it took.
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                self.ping()
                logger.info(f"Database connection established (attempt {attempt})")
                return attempt
            except OperationalError as e:
                if max_attempts is not None and attempt >= max_attempts:
                    raise
                logger.error(f"Database connection failed: {e}")
                logger.info(f"Retrying database connection in {retry_delay}s")
                time.sleep(retry_delay)

    def create_tables(self) -> None:
        # Registers all models on Base.metadata
        from .. import models  # noqa: F401

        Base.metadata.create_all(self.engine, checkfirst=True)
        logger.info("Database tables ready")

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
