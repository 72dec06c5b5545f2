"""FastAPI dependencies."""

from typing import Generator

from sqlalchemy.orm import Session

from packages.core.database import create_engine_from_env, get_session_factory

engine = create_engine_from_env()
SessionLocal = get_session_factory(engine)


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
