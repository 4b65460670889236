import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from roombook.database import enable_sqlite_fk, get_db
from roombook.main import app
from roombook.models import Base, Rooms
from roombook.services import events


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", enable_sqlite_fk)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch):
    """Replace the Redis client used by the event emitter."""
    fake = Mock()
    monkeypatch.setattr(events, "redis_client", fake)
    return fake


def make_room(db, room_no: int = 101, **fields) -> Rooms:
    obj = Rooms(
        name=fields.pop("name", f"Room {room_no}"),
        room_no=room_no,
        floor_no=fields.pop("floor_no", 1),
        capacity=fields.pop("capacity", 8),
        price_per_slot=fields.pop("price_per_slot", 40.0),
        amenities=fields.pop("amenities", '["projector", "whiteboard"]'),
        **fields,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


@pytest.fixture
def room_factory(db):
    return lambda room_no=101, **fields: make_room(db, room_no, **fields)


@pytest.fixture
def room(room_factory):
    return room_factory()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
