"""Translation between the wire schemas and the stored record."""

from customer_api.app.models.customer import Customer
from customer_api.app.schemas.customer import CustomerBase, CustomerRead


def to_customer(data: CustomerBase) -> Customer:
    """Build a record from a request body, carrying its ``id`` if present."""
    return Customer(
        id=getattr(data, "id", None),
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
    )


def to_customer_read(customer: Customer) -> CustomerRead:
    return CustomerRead(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
    )
