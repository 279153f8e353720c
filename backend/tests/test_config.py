"""
Phonebook Backend — Settings Tests
====================================

What:  Tests for environment parsing and validators in phonebook.config.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from phonebook.config import Settings


class TestSettings:

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert Settings().port == 8080

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(PydanticValidationError):
            Settings()

    def test_invalid_store_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "redis")

        with pytest.raises(PydanticValidationError):
            Settings()

    def test_cors_origins_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")

        assert Settings().cors_origins_list == ["http://a.example", "http://b.example"]

    def test_sqlite_detection(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
        assert Settings().is_sqlite is True

        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/phonebook")
        assert Settings().is_sqlite is False
