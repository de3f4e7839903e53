# tests/conftest.py

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy_utils import create_database, database_exists, drop_database

from eventdb.db.base_class import Base
from eventdb.db.session import make_engine

# Register every model on Base.metadata
import eventdb.models  # noqa: F401


@pytest.fixture(scope="function")
def database_url(tmp_path):
    """
    A throwaway SQLite database file per test. Files (rather than :memory:)
    let several sessions see the same data.
    """
    url = f"sqlite:///{tmp_path / 'event_management_test.db'}"
    if database_exists(url):
        drop_database(url)
    create_database(url)
    yield url
    drop_database(url)


@pytest.fixture(scope="function")
def engine(database_url):
    engine = make_engine(database_url)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()
