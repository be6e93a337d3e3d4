"""
Test configuration and shared fixtures for Neon Todos tests.

This file contains:
- Centralized test configuration
- Shared fixtures used across multiple test files
"""

import pytest
from todo_app import create_app
from todo_app.models import db


# Centralized test configuration
TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SECRET_KEY': 'test-secret-key',
    'PAGE_TITLE': 'Test Todos',
}


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app(TEST_CONFIG)
    return app


@pytest.fixture
def app_context(app):
    """Create an application context for database operations."""
    with app.app_context():
        yield


@pytest.fixture
def db_session(app_context):
    """Create the schema and clean up after tests."""
    db.create_all()
    yield db.session
    db.session.remove()
    db.drop_all()


@pytest.fixture
def client(app, db_session):
    """Create a test client backed by an empty database."""
    return app.test_client()


@pytest.fixture
def service(app, db_session):
    """The TodoService wired up by the app factory."""
    return app.todo_service


@pytest.fixture
def store(service):
    return service.store
