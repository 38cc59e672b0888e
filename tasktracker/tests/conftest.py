import os
from datetime import timedelta
from typing import Any, Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Settings are read at import time, so the test environment goes in first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "testsecretkey"
os.environ["LOG_LEVEL"] = "WARNING"

# Registers every model on Base.metadata
import tasktracker.models  # noqa: E402,F401
from tasktracker.models.base import Base  # noqa: E402
from tasktracker.core import security  # noqa: E402
from tasktracker.core.settings import settings as app_settings  # noqa: E402
from tasktracker.dependencies import get_db  # noqa: E402
from tasktracker.main import app  # noqa: E402
from tasktracker.models.enums import UserRole  # noqa: E402
from tasktracker.services import user_service  # noqa: E402

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)

TEST_PASSWORD = "testpassword"


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Fresh schema per test: every test starts with empty tables.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient whose requests share the test session.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    del app.dependency_overrides[get_db]


@pytest.fixture
def user_factory(db: Session) -> Callable[..., Any]:
    counter = {"n": 0}

    def _create(role: UserRole = UserRole.TEAM_MEMBER, name: str = None, email: str = None):
        counter["n"] += 1
        n = counter["n"]
        return user_service.register_user(db, {
            "name": name or f"User {n}",
            "email": email or f"user{n}@example.com",
            "password": TEST_PASSWORD,
            "role": role,
        })
    return _create


@pytest.fixture
def lead(user_factory):
    return user_factory(UserRole.LEAD, name="Lena Lead", email="lead@example.com")


@pytest.fixture
def other_lead(user_factory):
    return user_factory(UserRole.LEAD, name="Otto Lead", email="otto@example.com")


@pytest.fixture
def member(user_factory):
    return user_factory(UserRole.TEAM_MEMBER, name="Alice Member", email="alice@example.com")


@pytest.fixture
def other_member(user_factory):
    return user_factory(UserRole.TEAM_MEMBER, name="Bob Member", email="bob@example.com")


def token_headers_for(user: Any) -> Dict[str, str]:
    token, _ = security.create_access_token(
        data={"sub": str(user.id), "role": user.role},
        expires_delta=timedelta(minutes=app_settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def lead_headers(lead) -> Dict[str, str]:
    return token_headers_for(lead)


@pytest.fixture
def member_headers(member) -> Dict[str, str]:
    return token_headers_for(member)


@pytest.fixture
def other_member_headers(other_member) -> Dict[str, str]:
    return token_headers_for(other_member)


@pytest.fixture
def other_lead_headers(other_lead) -> Dict[str, str]:
    return token_headers_for(other_lead)
