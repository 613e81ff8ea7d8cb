# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
import uuid
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_DEFAULT_ROLES"] = "false"
os.environ["CLEANUP_EXPIRED_SESSIONS"] = "false"

from rolegate.config import settings
from rolegate.database import enable_sqlite_immediate_transactions, get_db
from rolegate.main import app
from rolegate.models import Role, User, UserRole, UserType
from rolegate.models.base import Base
from rolegate.models.session import Session as SessionModel
from rolegate.services import role_store

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
enable_sqlite_immediate_transactions(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_user(
    db_session,
    name: str,
    user_type: UserType = UserType.STAFF,
    roles: list[Role] | None = None,
) -> User:
    """Helper to create a persisted user holding the given roles."""
    user = User(
        email=f"{name}@example.com",
        display_name=name.title(),
        type=user_type,
        is_active=True,
    )
    db_session.add(user)
    db_session.flush()
    for role in roles or []:
        db_session.add(UserRole(user_id=user.id, role_id=role.id))
    db_session.commit()
    db_session.refresh(user)
    return user


def create_role(
    db_session,
    name: str,
    permissions: list[str] | None = None,
    parent: Role | None = None,
) -> Role:
    """Helper to create a persisted role without going through the service."""
    role = Role(name=name, color="#123456", parent_id=parent.id if parent else None)
    role_store.set_role_permissions(db_session, role, permissions or [])
    db_session.add(role)
    db_session.commit()
    db_session.refresh(role)
    return role


def create_session(db_session, user: User, expires_at: datetime | None = None) -> str:
    """Helper to store a session as the external login flow would."""
    token = uuid.uuid4().hex
    db_session.add(
        SessionModel(
            user_id=user.id,
            token=token,
            expires_at=expires_at or datetime.utcnow() + timedelta(days=1),
        )
    )
    db_session.commit()
    return token


def login(client, db_session, user: User) -> TestClient:
    """Attach a fresh session cookie for the user to the client."""
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session(db_session, user))
    return client


@pytest.fixture
def role_chain(db_session) -> dict[str, Role]:
    """Create the chain Root -> Manager -> Tutor plus an unrelated Client root."""
    root = create_role(db_session, "Root", ["roles.view", "roles.create"])
    manager = create_role(
        db_session,
        "Manager",
        ["roles.view", "users.view", "users.manage_roles"],
        parent=root,
    )
    tutor = create_role(
        db_session, "Tutor", ["missions.view", "extra_work.create"], parent=manager
    )
    client_role = create_role(db_session, "Client", ["bundles.view"])
    return {"root": root, "manager": manager, "tutor": tutor, "client": client_role}


@pytest.fixture
def admin_user(db_session) -> User:
    """Create an administrator without any roles."""
    return create_user(db_session, "admin", user_type=UserType.ADMIN)


@pytest.fixture
def manager_user(db_session, role_chain) -> User:
    """Create a staff user holding only the Manager role."""
    return create_user(db_session, "manager", roles=[role_chain["manager"]])


@pytest.fixture
def tutor_user(db_session, role_chain) -> User:
    """Create a staff user holding only the Tutor role."""
    return create_user(db_session, "tutor", roles=[role_chain["tutor"]])


@pytest.fixture
def plain_user(db_session) -> User:
    """Create a staff user without roles."""
    return create_user(db_session, "plain")


@pytest.fixture
def admin_client(client, db_session, admin_user):
    """Create a test client authenticated as the administrator."""
    return login(client, db_session, admin_user)


@pytest.fixture
def manager_client(client, db_session, manager_user):
    """Create a test client authenticated as the manager."""
    return login(client, db_session, manager_user)


@pytest.fixture
def make_user(db_session):
    """Factory fixture creating persisted users."""

    def factory(name: str, **kwargs) -> User:
        return create_user(db_session, name, **kwargs)

    return factory


@pytest.fixture
def make_role(db_session):
    """Factory fixture creating persisted roles."""

    def factory(name: str, permissions: list[str] | None = None, parent: Role | None = None) -> Role:
        return create_role(db_session, name, permissions, parent=parent)

    return factory


@pytest.fixture
def login_as(client, db_session):
    """Return a function switching the client to another user's session."""

    def switch(user: User) -> TestClient:
        return login(client, db_session, user)

    return switch


@pytest.fixture
def make_session(db_session):
    """Factory fixture storing sessions and returning their tokens."""

    def factory(user: User, expires_at: datetime | None = None) -> str:
        return create_session(db_session, user, expires_at=expires_at)

    return factory
