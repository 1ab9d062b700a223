"""Tests for the bootstrap entry point and auditor scoping."""

from sqlalchemy import inspect

from usermodel import main
from usermodel.core.models import auditor, get_current_auditor
from usermodel.db import DatabaseManager


class TestBootstrap:

    async def test_creates_all_tables(self, monkeypatch):
        manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
        disposed = []

        async def _keep_open():
            disposed.append(True)

        # keep the in-memory database alive so the tables can be inspected
        monkeypatch.setattr(manager, "dispose", _keep_open)
        monkeypatch.setattr(main, "db_manager", manager)

        await main.bootstrap()

        async with manager.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        await manager.engine.dispose()

        assert set(tables) == {"users", "useremails", "roles", "userroles"}
        assert disposed == [True]


class TestAuditorContext:

    def test_default_is_system(self):
        assert get_current_auditor() == "SYSTEM"

    def test_nested_binding_is_restored(self):
        with auditor("outer"):
            with auditor("inner"):
                assert get_current_auditor() == "inner"
            assert get_current_auditor() == "outer"
        assert get_current_auditor() == "SYSTEM"
