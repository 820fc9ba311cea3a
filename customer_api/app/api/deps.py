"""FastAPI dependencies shared by the endpoints."""

from fastapi import Request

from customer_api.app.services.customer_service import CustomerService


def get_customer_service(request: Request) -> CustomerService:
    """Return the service built by ``create_app``.

    Tests replace it through ``app.dependency_overrides``.
    """
    return request.app.state.customer_service
