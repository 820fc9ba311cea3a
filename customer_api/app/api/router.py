"""
Top‑level API router.

This router aggregates domain‑specific routers.  The customer routes
live under the singular ``/customer`` prefix that existing clients use.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customer", tags=["customer"])
