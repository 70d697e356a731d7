from __future__ import annotations

import pytest

from scheduler.infra.db import create_db_engine, init_db, make_session_factory
from scheduler.infra.repository import TaskRepository


@pytest.fixture
def session_factory():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def repo(session_factory) -> TaskRepository:
    return TaskRepository(session_factory)
