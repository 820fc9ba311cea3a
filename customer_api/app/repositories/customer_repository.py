"""
Repository for the ``customers`` table.

All queries use parameterized statements.  Each call opens its own
connection from the injected factory and closes it before returning,
so a repository instance holds no per-request state and can be shared.
Identifiers are stored as their canonical UUID string.
"""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import replace
from typing import Callable, List, Optional
from uuid import UUID

from customer_api.app.models.customer import Customer

ConnectionFactory = Callable[[], sqlite3.Connection]

_EMAIL_UNIQUE_VIOLATION = "UNIQUE constraint failed: customers.email"


def is_email_conflict(exc: sqlite3.IntegrityError) -> bool:
    """Return ``True`` if ``exc`` reports a duplicate customer e-mail."""
    return _EMAIL_UNIQUE_VIOLATION in str(exc)


class CustomerRepository:
    """Store gateway for customer records."""

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        self._connect = connection_factory

    def get_all(self) -> List[Customer]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, first_name, last_name, email FROM customers"
            ).fetchall()
            return [self._row_to_customer(row) for row in rows]
        finally:
            conn.close()

    def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, first_name, last_name, email FROM customers WHERE id = ?",
                (str(customer_id),),
            ).fetchone()
            return self._row_to_customer(row) if row else None
        finally:
            conn.close()

    def get_by_email(self, email: str) -> Optional[Customer]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, first_name, last_name, email FROM customers WHERE email = ?",
                (email,),
            ).fetchone()
            return self._row_to_customer(row) if row else None
        finally:
            conn.close()

    def save(self, customer: Customer) -> Customer:
        """Insert ``customer`` or replace the row with the same id.

        A record without an ``id`` receives a fresh UUID.  The saved
        record is returned; the argument is not modified.
        """
        if customer.id is None:
            customer = replace(customer, id=uuid.uuid4())
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO customers (id, first_name, last_name, email)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    first_name = excluded.first_name,
                    last_name = excluded.last_name,
                    email = excluded.email,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (str(customer.id), customer.first_name, customer.last_name, customer.email),
            )
            conn.commit()
            return customer
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete(self, customer: Customer) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM customers WHERE id = ?", (str(customer.id),))
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> Customer:
        """Convert a database row to a ``Customer`` record."""
        return Customer(
            id=UUID(row["id"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
