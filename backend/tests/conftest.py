"""
Point the app at a throwaway SQLite file before anything imports
catalog_admin, create the schema once and empty every table between tests.
"""
import os
import tempfile

os.environ["DB_URL"] = "sqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="catalog_admin_"), "test.db"
)

import pytest

from catalog_admin.db import Base, SessionLocal, engine
from catalog_admin import models  # noqa: F401  # registers every table
from catalog_admin.repositories.user_repo import UserRepository
from catalog_admin.security import hash_password, token_for

PWD = "StrongPassw0rd!"

Base.metadata.create_all(engine)


@pytest.fixture(autouse=True)
def empty_tables():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_account(role, *, status="active", email=None):
    db = SessionLocal()
    try:
        user = UserRepository(db).create(
            email=email or f"{role}@example.com",
            name=role.title(),
            password_hash=hash_password(PWD),
            role=role,
            status=status,
        )
        return user.id, {"Authorization": f"Bearer {token_for(user)}"}
    finally:
        db.close()


@pytest.fixture
def admin_headers():
    return make_account("admin")[1]


@pytest.fixture
def manager_headers():
    return make_account("manager")[1]


@pytest.fixture
def viewer_headers():
    return make_account("viewer")[1]
