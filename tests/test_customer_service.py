"""Tests for the customer service."""

import sqlite3
import uuid
from unittest.mock import MagicMock

import pytest

from customer_api.app.core.exceptions import CustomerAlreadyExistsError, CustomerNotFoundError
from customer_api.app.models.customer import Customer
from customer_api.app.repositories.customer_repository import CustomerRepository
from customer_api.app.schemas.customer import CustomerCreate, CustomerUpdate
from customer_api.app.services.customer_service import CustomerService

pytestmark = pytest.mark.asyncio


def make_create(email="alice@example.com", first_name="Alice", last_name="Smith"):
    return CustomerCreate(first_name=first_name, last_name=last_name, email=email)


def make_update(customer_id, email="alice@example.com", first_name="Alice", last_name="Smith"):
    return CustomerUpdate(id=customer_id, first_name=first_name, last_name=last_name, email=email)


class TestCreate:
    async def test_create_then_get(self, service):
        customer_id = await service.create(make_create())

        result = await service.get_by_id(customer_id)
        assert result.id == customer_id
        assert result.first_name == "Alice"
        assert result.last_name == "Smith"
        assert result.email == "alice@example.com"

    async def test_create_duplicate_email(self, service, repository):
        await service.create(make_create())

        with pytest.raises(CustomerAlreadyExistsError) as exc_info:
            await service.create(make_create(first_name="Bob"))

        assert str(exc_info.value) == "Customer with e-mail: alice@example.com already exists"
        assert len(repository.get_all()) == 1

    async def test_create_ignores_client_id(self, service):
        supplied = uuid.uuid4()
        data = CustomerCreate(id=supplied, first_name="Alice", last_name="Smith", email="alice@example.com")

        customer_id = await service.create(data)

        assert customer_id != supplied
        with pytest.raises(CustomerNotFoundError):
            await service.get_by_id(supplied)

    async def test_store_rejects_duplicate_that_passed_check(self, service, repository, monkeypatch):
        """A concurrent writer may insert the e-mail between check and save."""
        await service.create(make_create())
        monkeypatch.setattr(repository, "get_by_email", lambda email: None)

        with pytest.raises(CustomerAlreadyExistsError):
            await service.create(make_create(first_name="Bob"))

        assert len(repository.get_all()) == 1

    async def test_other_integrity_errors_propagate(self):
        repository = MagicMock(spec=CustomerRepository)
        repository.get_by_email.return_value = None
        repository.save.side_effect = sqlite3.IntegrityError("NOT NULL constraint failed: customers.email")
        service = CustomerService(repository)

        with pytest.raises(sqlite3.IntegrityError):
            await service.create(make_create())


class TestRead:
    async def test_list_all(self, service):
        first = await service.create(make_create())
        second = await service.create(make_create(email="bob@example.com", first_name="Bob"))

        result = await service.list_all()

        assert {c.id for c in result} == {first, second}

    async def test_list_all_empty(self, service):
        assert await service.list_all() == []

    async def test_get_unknown_id(self, service):
        missing = uuid.uuid4()

        with pytest.raises(CustomerNotFoundError) as exc_info:
            await service.get_by_id(missing)

        assert str(exc_info.value) == f"Customer with id {missing} not found"


class TestUpdate:
    async def test_update_fields(self, service):
        customer_id = await service.create(make_create())

        await service.update(make_update(customer_id, first_name="Alicia", last_name="Jones"))

        result = await service.get_by_id(customer_id)
        assert (result.first_name, result.last_name, result.email) == ("Alicia", "Jones", "alice@example.com")

    async def test_update_unknown_id(self, service):
        with pytest.raises(CustomerNotFoundError):
            await service.update(make_update(uuid.uuid4()))

    async def test_unchanged_email_skips_uniqueness_check(self):
        customer_id = uuid.uuid4()
        repository = MagicMock(spec=CustomerRepository)
        repository.get_by_id.return_value = Customer(
            id=customer_id, first_name="Alice", last_name="Smith", email="alice@example.com"
        )
        service = CustomerService(repository)

        await service.update(make_update(customer_id, first_name="Alicia"))

        repository.get_by_email.assert_not_called()
        saved = repository.save.call_args.args[0]
        assert saved.first_name == "Alicia"
        assert saved.id == customer_id

    async def test_changed_email_collision(self, service):
        alice_id = await service.create(make_create())
        await service.create(make_create(email="bob@example.com", first_name="Bob"))

        with pytest.raises(CustomerAlreadyExistsError):
            await service.update(make_update(alice_id, email="bob@example.com", first_name="Changed"))

        result = await service.get_by_id(alice_id)
        assert result.email == "alice@example.com"
        assert result.first_name == "Alice"


class TestDelete:
    async def test_delete(self, service):
        customer_id = await service.create(make_create())

        await service.delete(customer_id)

        with pytest.raises(CustomerNotFoundError):
            await service.get_by_id(customer_id)

    async def test_delete_unknown_id(self, service):
        with pytest.raises(CustomerNotFoundError):
            await service.delete(uuid.uuid4())


async def test_customer_lifecycle(service):
    alice_id = await service.create(make_create(email="alice@example.com"))

    with pytest.raises(CustomerAlreadyExistsError):
        await service.create(make_create(email="alice@example.com", first_name="Bob"))

    await service.update(make_update(alice_id, email="bob@example.com"))
    assert (await service.get_by_id(alice_id)).email == "bob@example.com"

    await service.delete(alice_id)
    with pytest.raises(CustomerNotFoundError):
        await service.get_by_id(alice_id)
