import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from blogboard.config import settings
from blogboard.infrastructure.db import models  # noqa: F401
from blogboard.infrastructure.db.session import Base, build_engine, get_db
from blogboard.infrastructure.logging import configure_logging
from blogboard.main import app
from tests.helpers.factories import create_user


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging():
    settings.environment = "test"
    settings.log_level = "warning"
    configure_logging()


@pytest.fixture(scope="session")
def database_url(tmp_path_factory):
    return f"sqlite:///{tmp_path_factory.mktemp('db') / 'blogboard-test.db'}"


def run_migrations(database_url: str) -> None:
    os.environ["DATABASE_URL"] = database_url
    settings.database_url = database_url
    alembic_config = Config(str(Path(__file__).resolve().parents[1] / "alembic.ini"))
    command.upgrade(alembic_config, "head")


@pytest.fixture(scope="session")
def engine(database_url):
    run_migrations(database_url=database_url)
    engine = build_engine(database_url)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def clean_database(engine):
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


@pytest.fixture
def db_session(engine):
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_users(db_session):
    return {
        "alice": create_user(db_session, "alice"),
        "bob": create_user(db_session, "bob"),
    }
