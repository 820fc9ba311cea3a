"""
Business logic for customers.

``CustomerService`` owns the two rules of the domain:

* an e-mail belongs to at most one customer, checked on create and
  whenever an update changes the e-mail;
* reads and mutations of a specific customer fail with
  ``CustomerNotFoundError`` when the identifier is unknown.

The e-mail check is a read followed by a write.  The ``customers`` table
also carries a unique index on ``email``; if a concurrent writer wins the
race, the store rejects the second write and the violation is reported as
``CustomerAlreadyExistsError`` as well.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional
from uuid import UUID

from customer_api.app.core.exceptions import CustomerAlreadyExistsError, CustomerNotFoundError
from customer_api.app.models.customer import Customer
from customer_api.app.repositories.customer_repository import CustomerRepository, is_email_conflict
from customer_api.app.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from customer_api.app.services.customer_mapper import to_customer, to_customer_read


class CustomerService:
    """Service for managing customer records."""

    def __init__(self, repository: CustomerRepository, logger: Optional[logging.Logger] = None) -> None:
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    async def list_all(self) -> List[CustomerRead]:
        """Return every customer in store order."""
        return [to_customer_read(customer) for customer in self.repository.get_all()]

    async def get_by_id(self, customer_id: UUID) -> CustomerRead:
        return to_customer_read(self._require(customer_id))

    async def create(self, data: CustomerCreate) -> UUID:
        """Persist a new customer and return its assigned identifier.

        Any ``id`` carried by ``data`` is discarded.
        """
        self._ensure_email_available(data.email)
        customer = to_customer(data)
        customer.id = None
        saved = self._save(customer)
        self.logger.info("Created customer %s", saved.id)
        return saved.id

    async def update(self, data: CustomerUpdate) -> None:
        """Replace first name, last name and e-mail of an existing customer.

        The e-mail check only runs when the e-mail changes, so re-saving a
        customer with its own address is allowed.
        """
        customer = self._require(data.id)
        if data.email != customer.email:
            self._ensure_email_available(data.email)
        self._merge(customer, data)
        self._save(customer)
        self.logger.info("Updated customer %s", customer.id)

    async def delete(self, customer_id: UUID) -> None:
        customer = self._require(customer_id)
        self.repository.delete(customer)
        self.logger.info("Deleted customer %s", customer_id)

    def _require(self, customer_id: UUID) -> Customer:
        customer = self.repository.get_by_id(customer_id)
        if customer is None:
            self.logger.warning("Customer %s not found", customer_id)
            raise CustomerNotFoundError(customer_id)
        return customer

    def _ensure_email_available(self, email: str) -> None:
        if self.repository.get_by_email(email) is not None:
            self.logger.warning("E-mail %s is already in use", email)
            raise CustomerAlreadyExistsError(email)

    def _save(self, customer: Customer) -> Customer:
        try:
            return self.repository.save(customer)
        except sqlite3.IntegrityError as exc:
            if is_email_conflict(exc):
                self.logger.warning("E-mail %s is already in use", customer.email)
                raise CustomerAlreadyExistsError(customer.email) from exc
            raise

    @staticmethod
    def _merge(customer: Customer, data: CustomerUpdate) -> None:
        customer.first_name = data.first_name
        customer.last_name = data.last_name
        customer.email = data.email
