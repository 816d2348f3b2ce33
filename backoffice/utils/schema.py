"""
Database creation and DDL rendering
"""
import logging
from typing import List

from sqlalchemy import create_engine, create_mock_engine, text
from sqlalchemy.engine import make_url

from backoffice.config import DATABASE_URL, DB_CHARSET
from backoffice.utils.database import Base

logger = logging.getLogger(__name__)

DEFAULT_CHARSETS = {
    "postgresql": "UTF8",
    "mysql": "utf8mb4",
}

MYSQL_COLLATIONS = {
    "utf8mb4": "utf8mb4_unicode_ci",
}

DIALECT_URLS = {
    "postgresql": "postgresql://",
    "mysql": "mysql://",
    "sqlite": "sqlite://",
}


def create_database_sql(dialect_name: str, name: str, charset: str = "") -> str:
    """Statement creating the database with its character encoding"""
    if dialect_name not in DEFAULT_CHARSETS:
        raise ValueError(f"Unsupported dialect for CREATE DATABASE: {dialect_name}")
    dialect = make_url(DIALECT_URLS[dialect_name]).get_dialect()()
    name = dialect.identifier_preparer.quote(name)
    charset = charset or DEFAULT_CHARSETS[dialect_name]
    if dialect_name == "postgresql":
        return f"CREATE DATABASE {name} ENCODING '{charset}'"
    sql = f"CREATE DATABASE IF NOT EXISTS {name} CHARACTER SET {charset}"
    collation = MYSQL_COLLATIONS.get(charset)
    if collation:
        sql += f" COLLATE {collation}"
    return sql


def create_database(url: str = DATABASE_URL, charset: str = DB_CHARSET) -> bool:
    """
    Create the database named in the URL if it does not exist yet.

    SQLite creates its file on first connect, so nothing happens there.
    Returns True when a CREATE DATABASE statement was executed.
    """
    url = make_url(url)
    dialect_name = url.get_backend_name()
    if dialect_name == "sqlite":
        logger.info("SQLite database needs no CREATE DATABASE, skipping")
        return False

    name = url.database
    # Connect to the server rather than to the database being created
    server_url = url.set(database="postgres" if dialect_name == "postgresql" else None)
    engine = create_engine(server_url, isolation_level="AUTOCOMMIT")
    try:
        with engine.connect() as conn:
            if dialect_name == "postgresql":
                exists = conn.execute(
                    text("SELECT 1 FROM pg_database WHERE datname = :name"), {"name": name}
                ).scalar()
                if exists:
                    logger.info(f"Database {name} already exists")
                    return False
            conn.execute(text(create_database_sql(dialect_name, name, charset)))
            logger.info(f"Database {name} created")
            return True
    finally:
        engine.dispose()


def render_schema_sql(dialect_name: str) -> str:
    """Full DDL (types, tables, indexes) for a dialect, without connecting to a server"""
    if dialect_name not in DIALECT_URLS:
        raise ValueError(f"Unsupported dialect: {dialect_name}")

    import backoffice.models  # noqa: F401

    statements: List[str] = []

    def collect(sql, *multiparams, **params):
        statements.append(str(sql.compile(dialect=mock_engine.dialect)).strip())

    mock_engine = create_mock_engine(DIALECT_URLS[dialect_name], collect)
    Base.metadata.create_all(mock_engine, checkfirst=False)
    return ";\n\n".join(statements) + ";\n"
