"""
Database connection management.

Route handlers receive a SQLAlchemy Session through the get_db() dependency.
The engine is built from DATABASE_URL (see config.py); SQLite URLs get
check_same_thread disabled because FastAPI runs sync handlers in a threadpool.

Environment variables:
    - DATABASE_URL: SQLAlchemy connection URL (default: sqlite:///./cafe.db)
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from .config import DATABASE_URL
from .models import Base

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
    pool_pre_ping=True,
    echo=False,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a SQLAlchemy Session.

    Usage:
        @router.get("/")
        def index(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create any missing tables on the current engine."""
    Base.metadata.create_all(bind=engine)


# Create tables on module load
init_db()
