"""
Error types raised by the service layer.

The API layer translates these into HTTP responses (see
``api.error_handlers``).  Messages are human readable and returned to
the caller verbatim.
"""

from uuid import UUID


class CustomerError(Exception):
    """Base class for customer business rule violations."""


class CustomerNotFoundError(CustomerError):
    """Raised when an identifier does not resolve to a stored customer."""

    def __init__(self, customer_id: UUID) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer with id {customer_id} not found")


class CustomerAlreadyExistsError(CustomerError):
    """Raised when an e-mail is already owned by another customer."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Customer with e-mail: {email} already exists")
