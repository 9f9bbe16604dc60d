import os
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
        # Required: key that verifies bearer tokens
        self.SECRET_KEY: str = os.getenv("SECRET_KEY")
        self.ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
        # Comma separated list of allowed frontend origins
        self.CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_DIR: str = os.getenv("LOG_DIR", "logs")
        self.LOG_TO_FILE: bool = _as_bool(os.getenv("LOG_TO_FILE", "1"))

        if not self.SECRET_KEY:
            raise RuntimeError("SECRET_KEY is not set. Provide the key used to verify bearer tokens.")

    @property
    def cors_origins(self):
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
