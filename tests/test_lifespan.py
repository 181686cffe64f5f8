"""
Job Board Backend — Startup & Shutdown Tests
=============================================

What we test:
    ✅ Startup creates the database file and its parent directory
    ✅ Startup refuses an unusable database location
    ✅ Startup refuses API_KEY_MODE=require without API_KEY
    ✅ The process entry point rejects invalid configuration
"""

import pytest
from sqlalchemy import inspect

from jobboard import __main__ as entrypoint
from jobboard.main import create_app, lifespan


@pytest.fixture(autouse=True)
def keep_logging_config(monkeypatch):
    # Leave pytest's log capture handlers in place
    monkeypatch.setattr("jobboard.main.setup_logging", lambda level: None)


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_creates_database_and_tables(self, make_settings, tmp_path):
        db_file = tmp_path / "nested" / "dir" / "board.db"
        app = create_app(make_settings(database_url=str(db_file)))

        async with lifespan(app):
            assert db_file.exists()
            async with app.state.database.engine.connect() as conn:
                tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
            assert {"users", "jobs", "applications"} <= set(tables)

    @pytest.mark.asyncio
    async def test_startup_is_idempotent(self, make_settings):
        settings = make_settings()
        for _ in range(2):
            app = create_app(settings)
            async with lifespan(app):
                assert await app.state.database.ping()

    @pytest.mark.asyncio
    async def test_unusable_database_location_fails(self, make_settings, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("plain file")
        app = create_app(make_settings(database_url=str(blocker / "board.db")))

        with pytest.raises(OSError):
            async with lifespan(app):
                pass

    @pytest.mark.asyncio
    async def test_require_mode_without_key_fails(self, make_settings):
        app = create_app(make_settings(api_key_mode="require", api_key=""))

        with pytest.raises(ValueError, match="API_KEY_MODE=require"):
            async with lifespan(app):
                pass


class TestEntryPoint:

    def test_invalid_configuration_exits_with_2(self, monkeypatch, capsys):
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/jobs")
        assert entrypoint.main() == 2
        assert "Invalid configuration" in capsys.readouterr().err
