"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored record to decouple the API
representation from persistence.  The wire format uses camelCase field
names (``firstName``, ``lastName``).
"""
