"""Tests for the SQLite customer repository."""

import sqlite3
import uuid

import pytest

from customer_api.app.models.customer import Customer
from customer_api.app.repositories.customer_repository import is_email_conflict


def make_customer(email="alice@example.com", first_name="Alice", customer_id=None):
    return Customer(id=customer_id, first_name=first_name, last_name="Smith", email=email)


class TestCustomerRepository:
    def test_save_assigns_id(self, repository):
        customer = make_customer()

        saved = repository.save(customer)

        assert isinstance(saved.id, uuid.UUID)
        assert customer.id is None
        assert repository.get_by_id(saved.id) == saved

    def test_save_with_existing_id_replaces(self, repository):
        saved = repository.save(make_customer())

        repository.save(Customer(id=saved.id, first_name="Alicia", last_name="Jones", email="alicia@example.com"))

        stored = repository.get_by_id(saved.id)
        assert stored.first_name == "Alicia"
        assert stored.email == "alicia@example.com"
        assert len(repository.get_all()) == 1

    def test_get_by_email(self, repository):
        saved = repository.save(make_customer())

        assert repository.get_by_email("alice@example.com") == saved
        assert repository.get_by_email("nobody@example.com") is None

    def test_get_by_id_missing(self, repository):
        assert repository.get_by_id(uuid.uuid4()) is None

    def test_get_all(self, repository):
        first = repository.save(make_customer())
        second = repository.save(make_customer(email="bob@example.com", first_name="Bob"))

        assert {c.id for c in repository.get_all()} == {first.id, second.id}

    def test_delete(self, repository):
        saved = repository.save(make_customer())

        repository.delete(saved)

        assert repository.get_by_id(saved.id) is None
        assert repository.get_all() == []

    def test_duplicate_email_rejected_by_store(self, repository):
        repository.save(make_customer())

        with pytest.raises(sqlite3.IntegrityError) as exc_info:
            repository.save(make_customer(first_name="Bob"))

        assert is_email_conflict(exc_info.value)
        assert len(repository.get_all()) == 1


def test_is_email_conflict_ignores_other_violations():
    assert not is_email_conflict(sqlite3.IntegrityError("NOT NULL constraint failed: customers.email"))
