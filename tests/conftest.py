"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from realty import models  # noqa: F401
from realty.database import Base, get_db
from realty.exceptions import GeocodingError
from realty.main import app
from realty.seed import seed_demo_data
from realty.services.geocoding import GeocodedAddress, get_geocoding_service


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id=None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


class FakeGeocoder:
    """Stands in for the geocoding API; records every address it is asked about."""

    def __init__(self):
        self.calls: list[str] = []
        self.fail = False

    @staticmethod
    def resolve(address: str) -> GeocodedAddress:
        """The deterministic answer for an address."""
        normalized = address.strip()
        offset = (sum(map(ord, normalized)) % 1000) / 10000
        return GeocodedAddress(
            address=f"{normalized.title()}, USA",
            lat=37.8 + offset,
            long=-122.2 - offset,
        )

    async def geocode(self, address: str) -> GeocodedAddress:
        self.calls.append(address)
        if self.fail:
            raise GeocodingError("Geocoder unavailable")
        return self.resolve(address)


# PostgreSQL when TEST_DATABASE_URL is set, SQLite otherwise
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def geocoder():
    """A fake geocoder shared by the app and the test."""
    return FakeGeocoder()


@pytest.fixture(scope="function")
def client(db, geocoder):
    """Create a test client with database and geocoder overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_geocoding_service] = lambda: geocoder
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seed(db):
    """Two users with a token, a todo and a listing each."""
    return seed_demo_data(db)


@pytest.fixture
def auth_headers(seed):
    """Headers authenticating as the first seeded user."""
    user = seed.users[0]
    return AuthHeaders({"x-auth": seed.tokens[0]}, user_id=user.id, email=user.email)


@pytest.fixture
def other_auth_headers(seed):
    """Headers authenticating as the second seeded user."""
    user = seed.users[1]
    return AuthHeaders({"x-auth": seed.tokens[1]}, user_id=user.id, email=user.email)
