"""Shared fixtures: an in-memory SQLite database per test."""

import pytest
import pytest_asyncio

from usermodel.api.v1.models import Role
from usermodel.db import DatabaseManager


@pytest_asyncio.fixture
async def db():
    """DatabaseManager bound to a fresh in-memory database with all tables created."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest_asyncio.fixture
async def roles(db):
    """Persisted ADMIN and USER roles, keyed by name."""
    async with db.transaction() as session:
        admin = Role(name="ADMIN")
        user = Role(name="USER")
        session.add_all([admin, user])
    return {"ADMIN": admin, "USER": user}


@pytest.fixture
def user_payload():
    return {
        "username": "Alice",
        "password": "s3cret-Pa55",
        "primaryemail": "Alice@Example.com",
        "useremails": [
            {"useremail": "Alice.Work@Example.com"},
            {"useremail": "alice.home@example.com", "user": {"userid": 99}},
        ],
        "roles": [{"role": {"name": "ADMIN"}}],
    }
