"""
Database engine, session factory and declarative base
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from backoffice.config import DATABASE_URL, SQL_ECHO

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE rules unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """Create an engine for the given URL"""
    kwargs.setdefault("echo", SQL_ECHO)
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = build_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Yield a session and close it when the caller is done"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine = engine):
    """Create every table registered on Base"""
    # Registers the model classes on Base.metadata
    import backoffice.models  # noqa: F401

    Base.metadata.create_all(bind=bind)


def drop_tables(bind: Engine = engine):
    """Drop every table registered on Base"""
    import backoffice.models  # noqa: F401

    Base.metadata.drop_all(bind=bind)
