"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    def test_secret_is_required(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url="sqlite+aiosqlite:///x.db")

    def test_database_url_is_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret="s")

    def test_blank_secret_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret="  ", database_url="sqlite+aiosqlite:///x.db")

    def test_defaults(self, monkeypatch):
        for var in ("PORT", "JWT_EXPIRY_SECONDS", "BCRYPT_ROUNDS"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None, jwt_secret="s", database_url="sqlite+aiosqlite:///x.db")
        assert s.port == 3000
        assert s.jwt_expiry_seconds == 7 * 24 * 3600
        assert s.bcrypt_rounds == 10

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "from-env")
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///env.db")
        monkeypatch.setenv("PORT", "8080")
        s = Settings(_env_file=None)
        assert s.jwt_secret == "from-env"
        assert s.port == 8080
