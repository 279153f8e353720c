"""
Phonebook Backend — Schema Creation and Migration Tests
========================================================

What:  Tests for create_schema() startup behaviour and the Alembic environment.
How:   A MagicMock engine whose begin() fails before succeeding; the
       tenacity wait is patched to zero so retries run instantly.

Test Strategy:
    ✅ Transient connection failure is retried, then schema is created
    ✅ Persistent failure re-raises after db_connect_attempts tries
    ✅ Non-connection errors are not retried
    ✅ Alembic upgrade honours -x db_url and refuses the in-memory backend
"""

from argparse import Namespace
from pathlib import Path

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError, ProgrammingError
from tenacity import wait_none

from phonebook.config import settings
from phonebook.database import create_schema

BACKEND_DIR = Path(__file__).resolve().parent.parent


def _begin_context():
    """Async context manager standing in for `engine.begin()`."""
    conn = MagicMock()
    conn.run_sync = AsyncMock()
    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=conn)
    ctx.__aexit__ = AsyncMock(return_value=False)
    return ctx, conn


def _refused():
    return OperationalError("CONNECT", {}, Exception("connection refused"))


class TestCreateSchema:

    @pytest.mark.asyncio
    async def test_retries_after_connection_failure(self):
        ctx, conn = _begin_context()
        engine = MagicMock()
        engine.begin.side_effect = [_refused(), ctx]

        with patch("phonebook.database.wait_exponential", return_value=wait_none()):
            await create_schema(bind=engine)

        assert engine.begin.call_count == 2
        conn.run_sync.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_gives_up_after_configured_attempts(self):
        engine = MagicMock()
        engine.begin.side_effect = _refused()

        with patch("phonebook.database.wait_exponential", return_value=wait_none()):
            with pytest.raises(OperationalError):
                await create_schema(bind=engine)

        assert engine.begin.call_count == settings.db_connect_attempts

    @pytest.mark.asyncio
    async def test_schema_errors_not_retried(self):
        engine = MagicMock()
        engine.begin.side_effect = ProgrammingError("CREATE TABLE", {}, Exception("permission denied"))

        with patch("phonebook.database.wait_exponential", return_value=wait_none()):
            with pytest.raises(ProgrammingError):
                await create_schema(bind=engine)

        assert engine.begin.call_count == 1


class TestMigrations:

    def _config(self, *x_args):
        # No ini file: fileConfig() would reset the loggers other tests capture
        cfg = Config(cmd_opts=Namespace(x=list(x_args)))
        cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
        return cfg

    def test_upgrade_uses_db_url_override(self, tmp_path):
        db_file = tmp_path / "migrated.db"

        command.upgrade(self._config(f"db_url=sqlite+aiosqlite:///{db_file}"), "head")

        engine = create_engine(f"sqlite:///{db_file}")
        try:
            assert {"persons", "alembic_version"} <= set(inspect(engine).get_table_names())
        finally:
            engine.dispose()

    def test_memory_backend_without_override_is_refused(self, monkeypatch):
        monkeypatch.setattr(settings, "store_backend", "memory")

        with pytest.raises(RuntimeError, match="pass -x db_url"):
            command.upgrade(self._config(), "head")
