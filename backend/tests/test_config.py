import pytest

from storefront.core.config import Settings
from storefront.database.database import normalize_database_url


def test_settings_require_secret_key(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        Settings()


def test_settings_reject_empty_secret_key(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "")
    with pytest.raises(RuntimeError):
        Settings()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "s3cret")
    monkeypatch.setenv("CORS_ORIGINS", "https://admin.example.com, http://localhost:3000,")
    settings = Settings()
    assert settings.SECRET_KEY == "s3cret"
    assert settings.ALGORITHM == "HS256"
    assert settings.cors_origins == ["https://admin.example.com", "http://localhost:3000"]


@pytest.mark.parametrize("url,expected", [
    ("postgres://u:p@db/shop", "postgresql+psycopg://u:p@db/shop"),
    ("postgresql://u:p@db/shop", "postgresql+psycopg://u:p@db/shop"),
    ("postgresql+psycopg://u:p@db/shop", "postgresql+psycopg://u:p@db/shop"),
    ("sqlite://", "sqlite://"),
])
def test_database_url_normalization(url, expected):
    assert normalize_database_url(url) == expected
