from __future__ import annotations

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from scheduler.config import SETTINGS

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str) -> Engine:
    options = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if url in _MEMORY_URLS:
            # every connection must see the same in-memory database
            options["poolclass"] = StaticPool
    return create_engine(url, **options)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, autocommit=False)


engine = create_db_engine(SETTINGS.database_url)
SessionLocal = make_session_factory(engine)
Base = declarative_base()


def init_db(bind: Engine | None = None) -> None:
    """Check the connection and create the scheduler table when it is missing."""
    from . import models  # noqa: F401

    bind = bind or engine
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))
    Base.metadata.create_all(bind)
