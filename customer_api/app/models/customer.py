"""Stored customer record."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class Customer:
    """A customer row of the ``customers`` table.

    ``id`` is ``None`` until the record is first saved; the repository
    assigns it once and it never changes afterwards.
    """

    id: Optional[UUID]
    first_name: str
    last_name: str
    email: str
