"""
Customer endpoints.

These routes expose create, read, update and delete operations for
customer records.  The status codes are a fixed contract shared with
existing consumers: reads answer ``302 Found`` with the body, creation
answers ``201 Created`` with the new identifier, and update and delete
answer ``200 OK`` with an empty body.  Request bodies are validated by
the schemas before the service is called; failures are mapped to
responses by ``api.error_handlers``.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from customer_api.app.api.deps import get_customer_service
from customer_api.app.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from customer_api.app.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[CustomerRead], status_code=status.HTTP_302_FOUND)
async def find_all(service: CustomerService = Depends(get_customer_service)) -> List[CustomerRead]:
    """Return all customers."""
    logger.debug("Find all customers")
    return await service.list_all()


@router.get("/{customer_id}", response_model=CustomerRead, status_code=status.HTTP_302_FOUND)
async def find_by_id(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Return a single customer; 404 if the identifier is unknown."""
    logger.debug("Find customer by id: %s", customer_id)
    return await service.get_by_id(customer_id)


@router.post("", response_model=UUID, status_code=status.HTTP_201_CREATED)
async def create(
    customer_in: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> UUID:
    """Create a customer and return its identifier.

    Returns HTTP 208 if the e-mail is already registered.
    """
    logger.debug("Create customer: %s", customer_in.email)
    return await service.create(customer_in)


@router.put("", status_code=status.HTTP_200_OK)
async def update(
    customer_in: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Update a customer.

    Returns HTTP 404 if the identifier is unknown and HTTP 208 if the new
    e-mail belongs to another customer.
    """
    logger.debug("Update customer: %s", customer_in.id)
    await service.update(customer_in)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{customer_id}", status_code=status.HTTP_200_OK)
async def delete(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Delete a customer; 404 if the identifier is unknown."""
    logger.debug("Delete customer: %s", customer_id)
    await service.delete(customer_id)
    return Response(status_code=status.HTTP_200_OK)
