"""
Job Board Backend — Configuration Tests
========================================

What we test:
    ✅ DATABASE_URL normalisation (plain paths, sqlite URLs, other backends)
    ✅ Field validators (log level, API key mode, port range)
    ✅ Startup validation of setting combinations
    ✅ Derived properties (CORS list, database path)
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from jobboard.config import Settings, normalize_database_url


class TestNormalizeDatabaseUrl:

    def test_absolute_path(self):
        assert normalize_database_url("/data/jobboard.db") == "sqlite+aiosqlite:////data/jobboard.db"

    def test_relative_path(self):
        assert normalize_database_url("./jobboard.db") == "sqlite+aiosqlite:///./jobboard.db"

    def test_plain_sqlite_url_gets_async_driver(self):
        assert normalize_database_url("sqlite:///jobboard.db") == "sqlite+aiosqlite:///jobboard.db"

    def test_other_sqlite_driver_is_replaced(self):
        assert normalize_database_url("sqlite+pysqlite:///x.db") == "sqlite+aiosqlite:///x.db"

    def test_async_url_unchanged(self):
        url = "sqlite+aiosqlite:///jobboard.db"
        assert normalize_database_url(url) == url

    def test_surrounding_whitespace_is_ignored(self):
        assert normalize_database_url("  /tmp/a.db \n") == "sqlite+aiosqlite:////tmp/a.db"

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="must not be empty"):
            normalize_database_url("   ")

    def test_postgres_rejected(self):
        with pytest.raises(ValueError, match="Unsupported DATABASE_URL scheme 'postgresql'"):
            normalize_database_url("postgresql://user:pw@localhost/jobs")


class TestSettingsFields:

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "HOST", "PORT", "LOG_LEVEL", "API_KEY_MODE", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite+aiosqlite:///./data/jobboard.db"
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.log_level == "INFO"
        assert settings.api_key_mode == "off"
        assert settings.cors_origins == "*"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", str(tmp_path / "env.db"))
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("API_KEY_MODE", "LOG")
        settings = Settings(_env_file=None)
        assert settings.database_url.endswith("env.db")
        assert settings.port == 9090
        assert settings.api_key_mode == "log"

    def test_log_level_is_uppercased(self, make_settings):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self, make_settings):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            make_settings(log_level="chatty")

    def test_invalid_api_key_mode(self, make_settings):
        with pytest.raises(ValidationError, match="Invalid api_key_mode"):
            make_settings(api_key_mode="sometimes")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range(self, make_settings, port):
        with pytest.raises(ValidationError):
            make_settings(port=port)

    def test_non_sqlite_database_rejected(self, make_settings):
        with pytest.raises(ValidationError, match="Unsupported DATABASE_URL"):
            make_settings(database_url="mysql://localhost/jobs")

    def test_settings_are_frozen(self, make_settings):
        settings = make_settings()
        with pytest.raises(ValidationError):
            settings.port = 1234


class TestDerivedProperties:

    def test_cors_origins_list(self, make_settings):
        settings = make_settings(cors_origins="https://a.example, https://b.example,")
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_cors_wildcard(self, make_settings):
        assert make_settings().cors_origins_list == ["*"]

    def test_database_path(self, make_settings, tmp_path):
        settings = make_settings()
        assert settings.database_path == Path(tmp_path / "jobboard-test.db")

    def test_in_memory_database_has_no_path(self, make_settings):
        settings = make_settings(database_url="sqlite+aiosqlite:///:memory:")
        assert settings.database_path is None


class TestStartupValidation:

    def test_require_without_key_is_an_error(self, make_settings):
        settings = make_settings(api_key_mode="require", api_key="")
        with pytest.raises(ValueError, match="API_KEY_MODE=require"):
            settings.validate_for_startup()

    def test_require_with_key_is_valid(self, make_settings):
        settings = make_settings(api_key_mode="require", api_key="k")
        assert settings.validate_for_startup() == []

    def test_log_mode_without_key_warns(self, make_settings):
        settings = make_settings(api_key_mode="log", api_key="")
        warnings = settings.validate_for_startup()
        assert any("API_KEY is empty" in w for w in warnings)

    def test_missing_secret_key_warns(self, make_settings):
        settings = make_settings(secret_key="")
        warnings = settings.validate_for_startup()
        assert any("SECRET_KEY" in w for w in warnings)
