from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import DATABASE_URL, DEFAULT_DATABASE_URL, DATA_DIR, SQL_ECHO

Base = declarative_base()


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
    """
    Create an engine for the given URL.

    sqlite connections get foreign key enforcement (needed for the
    items -> packing_lists cascade) and a busy timeout.
    """
    if url == DEFAULT_DATABASE_URL:
        DATA_DIR.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, echo=echo, pool_pre_ping=True)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables known to the ORM metadata."""
    # Register the mapped classes on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(engine)


engine = build_engine()
SessionLocal = build_session_factory(engine)


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
