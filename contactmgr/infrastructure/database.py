"""
Database bootstrap — SQLAlchemy engine, session factory and the contact table.
The session factory is built once per process and handed to the adapters.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import BigInteger, Integer, String, create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Config

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class ContactRow(Base):
    """One row per Contact. Only the key is enforced by the storage layer."""

    __tablename__ = "contact"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column("firstName", String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column("lastName", String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)


@dataclass(frozen=True)
class DBRuntime:
    engine: Engine
    SessionLocal: sessionmaker

    def dispose(self) -> None:
        self.engine.dispose()


def build_database_url(config: Config) -> URL:
    """Parse DATABASE_URL and fold in credentials supplied separately."""
    url = make_url(config.database_url)
    if config.database_username:
        url = url.set(username=config.database_username)
    if config.database_password:
        url = url.set(password=config.database_password)
    return url


def _is_in_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine_and_sessionmaker(url, *, echo: bool = False) -> DBRuntime:
    """Create SQLAlchemy engine + sessionmaker.

    Notes:
      - SQLite needs check_same_thread=False once sessions leave the creating thread.
      - In-memory SQLite is one database per connection, so it is pinned to a
        single shared connection with StaticPool.
    """
    url = make_url(url)
    engine_kwargs = dict(echo=echo)

    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if _is_in_memory_sqlite(url):
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **engine_kwargs)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    return DBRuntime(engine=engine, SessionLocal=SessionLocal)


def apply_schema_policy(engine: Engine, policy: str) -> None:
    """
    create: drop and recreate the tables (all existing rows are lost).
    update: create whatever tables are missing, keep existing data.
    none:   leave the schema alone.
    """
    if policy == "create":
        Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
    elif policy == "update":
        Base.metadata.create_all(engine)
    elif policy == "none":
        pass
    else:
        raise ValueError(f"Unknown schema policy: {policy!r}")

    logger.info(f"Schema policy applied: {policy}")
