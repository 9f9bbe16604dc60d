from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from storefront.core.config import settings
from storefront.core.logger import setup_logger
from storefront.models.base import Base
import storefront.models

logger = setup_logger("database")


def normalize_database_url(url: str) -> str:
    # Hosted Postgres often hands out postgres:// URLs; route them through psycopg 3
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """SQLite ignores FOREIGN KEY and ON DELETE CASCADE unless asked per connection."""
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


DATABASE_URL = normalize_database_url(settings.DATABASE_URL)

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_base_metadata():
    return Base.metadata


def init_db(bind: Engine = None) -> None:
    bind = bind or engine
    logger.info(f"Creating tables on {bind.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=bind)
