"""Test configuration and shared fixtures"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from tagstore.app import app
from tagstore.config import Config, get_config
from tagstore.db import DatabaseConnection, get_db_connection


# each test class have it's own empty database
@pytest.fixture(scope="class")
def test_app():
    test_config = Config(
        # overwrite application name so it will use another database file
        app_name="tagstore-test",
        database_url_env=None,
    )
    app.dependency_overrides = {get_config: lambda: test_config}

    db_conn = get_db_connection(test_config)
    db_conn.create_tables()

    client = TestClient(app)
    yield client

    app.dependency_overrides = {}
    db_conn.drop_tables()
    db_conn.engine.dispose()
    # clean up test database file after tests
    if os.path.exists(test_config.database_path):
        os.remove(test_config.database_path)


@pytest.fixture
def db_conn():
    """In-memory database shared by every session of a single test"""
    conn = DatabaseConnection("sqlite://", poolclass=StaticPool)
    yield conn
    conn.engine.dispose()


@pytest.fixture
def db_session(db_conn: DatabaseConnection):
    session = db_conn.get_session()
    yield session
    session.close()
