"""Tests for application configuration."""
import pytest

from core.config import Settings


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_single_origin_string(self) -> None:
        """Single origin string is parsed correctly."""
        settings = Settings(_env_file=None, CORS_ORIGINS="http://localhost:5173")
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_parse_multiple_origins_comma_separated(self) -> None:
        """Multiple comma-separated origins are parsed correctly."""
        settings = Settings(
            _env_file=None,
            CORS_ORIGINS="http://localhost:5173,https://example.com",
        )
        assert settings.cors_origins == [
            "http://localhost:5173",
            "https://example.com",
        ]

    def test_parse_origins_with_whitespace(self) -> None:
        """Whitespace around origins is stripped."""
        settings = Settings(
            _env_file=None,
            CORS_ORIGINS="  http://localhost:5173 , https://example.com  ",
        )
        assert settings.cors_origins == [
            "http://localhost:5173",
            "https://example.com",
        ]

    def test_parse_empty_string(self) -> None:
        """Empty string results in empty list."""
        settings = Settings(_env_file=None, CORS_ORIGINS="")
        assert settings.cors_origins == []

    def test_parse_trailing_comma(self) -> None:
        """Trailing comma is handled (empty entries filtered)."""
        settings = Settings(_env_file=None, CORS_ORIGINS="http://localhost:5173,")
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", "https://a.test,https://b.test")
        settings = Settings(_env_file=None)
        assert settings.cors_origins == ["https://a.test", "https://b.test"]

    def test_default_cors_origins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default CORS origins is localhost:5173."""
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.cors_origins == ["http://localhost:5173"]


class TestDatabaseConfig:
    """Tests for database settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("CREATE_SCHEMA", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite+aiosqlite:///./bookmarks.db"
        assert settings.database_echo is False
        assert settings.create_schema is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://user@db/bookmarks")
        monkeypatch.setenv("CREATE_SCHEMA", "true")
        monkeypatch.setenv("PORT", "9000")
        settings = Settings(_env_file=None)
        assert settings.database_url == "postgresql+asyncpg://user@db/bookmarks"
        assert settings.create_schema is True
        assert settings.port == 9000
