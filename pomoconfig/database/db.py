"""Database connection and session management."""

from pathlib import Path
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session as OrmSession
from sqlalchemy.pool import StaticPool

from .models import Base

# ── paths ────────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "PomoConfig"
DB_PATH = APP_SUPPORT_DIR / "pomoconfig.db"


def default_database_url() -> str:
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DB_PATH}"


# ── public API ────────────────────────────────────────────────────────────


def create_session_factory(url: str | None = None, *, echo: bool = False) -> sessionmaker:
    """Build an engine for *url*, create the tables, return a session factory.

    In-memory SQLite shares one connection across threads so every
    session sees the same database.
    """
    url = url or default_database_url()
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker):
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    session: OrmSession = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
