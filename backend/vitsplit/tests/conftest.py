"""
Shared fixtures: in-memory database and an API client bound to it.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import vitsplit.models  # noqa: F401
from vitsplit.db.base import Base
from vitsplit.db.session import get_db
from vitsplit.main import app
from vitsplit.schemas.settlement import Participant

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_participants():
    """Build participants from (id, amount_paid[, is_participating]) tuples."""
    def _make(*rows):
        participants = []
        for row in rows:
            user_id, amount_paid = row[0], row[1]
            is_participating = row[2] if len(row) > 2 else True
            participants.append(Participant(
                id=user_id,
                name=user_id,
                amount_paid=amount_paid,
                is_participating=is_participating
            ))
        return participants
    return _make
