# tasktracker/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from tasktracker.core.settings import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the threadpool FastAPI runs sync endpoints in
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)


def init_db() -> None:
    """Create missing tables."""
    import tasktracker.models  # noqa: F401  registers every model on Base.metadata
    from tasktracker.models.base import Base
    Base.metadata.create_all(bind=engine)
