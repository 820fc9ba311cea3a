"""Pytest fixtures for Customer API tests."""

from functools import partial

import pytest
from fastapi.testclient import TestClient

from customer_api.app.core.config import Settings
from customer_api.app.core.db import get_connection, init_db
from customer_api.app.main import create_app
from customer_api.app.repositories.customer_repository import CustomerRepository
from customer_api.app.services.customer_service import CustomerService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file."""
    return Settings(database_url=str(tmp_path / "customers.db"))


@pytest.fixture
def db(settings):
    """Migrated database."""
    init_db(settings)
    return settings


@pytest.fixture
def repository(db):
    return CustomerRepository(partial(get_connection, db))


@pytest.fixture
def service(repository):
    return CustomerService(repository)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; entering the context runs the lifespan (migrations)."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return {"firstName": "Alice", "lastName": "Smith", "email": "alice@example.com"}
