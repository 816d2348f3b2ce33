import os

# Module-level engine in backoffice.utils.database must not point at a real server
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.seed import seed_database
from backoffice.utils.database import build_engine, create_tables


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def seeded_db(db):
    seed_database(db)
    # Tests work from the database state, not from objects left in the session
    db.expunge_all()
    return db
