"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from packages.core.models import Base


def get_database_url() -> str:
    """Get database URL from environment."""
    import os
    from urllib.parse import quote_plus

    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    db_user = os.getenv("DB_USER", "postgres")
    db_password = os.getenv("DB_PASSWORD", "postgres")
    db_host = os.getenv("DB_HOST", "localhost")
    db_port = os.getenv("DB_PORT", "5432")
    db_name = os.getenv("DB_NAME", "proposals")

    password_encoded = quote_plus(db_password)
    return f"postgresql://{db_user}:{password_encoded}@{db_host}:{db_port}/{db_name}"


def create_engine_from_env(database_url: str | None = None):
    """Create SQLAlchemy engine from environment."""
    database_url = database_url or get_database_url()
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=False, **kwargs)
    return create_engine(database_url, echo=False)


def get_session_factory(engine=None):
    """Get session factory."""
    if engine is None:
        engine = create_engine_from_env()
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine=None):
    """Initialize database (create tables)."""
    if engine is None:
        engine = create_engine_from_env()
    Base.metadata.create_all(bind=engine)
