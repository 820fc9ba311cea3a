"""
Pydantic schemas for customers.

``CustomerCreate`` and ``CustomerUpdate`` are the request bodies of
``POST /customer`` and ``PUT /customer``; ``CustomerRead`` is what the
read endpoints return.  Structural validation happens here, before a
request reaches the service layer:

* ``firstName`` and ``lastName`` must be present and not blank;
* ``email`` must be present, not blank and a well formed address;
* ``id`` must be present on update.

The fields are required but nullable: an absent field fails with
pydantic's ``missing`` error (rendered as "must not be null" by the 400
handler), an explicit ``null`` reaches the validators below.  Validation
messages are emitted as ``PydanticCustomError`` so that the 400 handler
can render them without pydantic's "Value error," prefix.
"""

from typing import Optional
from uuid import UUID

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

MUST_NOT_BE_NULL = "must not be null"
MUST_NOT_BE_BLANK = "must not be blank"
MUST_BE_WELL_FORMED_EMAIL = "must be a well-formed email address"

# Addresses are checked for syntax only.  Reserved names such as
# ``localhost``, ``*.local`` or ``*.test`` are legal domains for this
# service, so email-validator's special-use list is emptied in place.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _require_text(value: Optional[str]) -> str:
    if value is None:
        raise PydanticCustomError("not_null", MUST_NOT_BE_NULL)
    if not value.strip():
        raise PydanticCustomError("not_blank", MUST_NOT_BE_BLANK)
    return value


def is_well_formed_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


class CustomerBase(BaseModel):
    first_name: Optional[str] = Field(..., examples=["John"])
    last_name: Optional[str] = Field(..., examples=["Doe"])
    email: Optional[str] = Field(..., examples=["john.doe@example.com"])

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v)

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v):
        v = _require_text(v)
        if not is_well_formed_email(v):
            raise PydanticCustomError("email", MUST_BE_WELL_FORMED_EMAIL)
        return v


class CustomerCreate(CustomerBase):
    """Schema for creating a customer.

    An ``id`` sent by the client is accepted but ignored; the store
    assigns the identifier.
    """

    id: Optional[UUID] = None


class CustomerUpdate(CustomerBase):
    """Schema for updating a customer.

    All of ``firstName``, ``lastName`` and ``email`` are replaced; ``id``
    selects the record.
    """

    id: Optional[UUID] = Field(...)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        if v is None:
            raise PydanticCustomError("not_null", MUST_NOT_BE_NULL)
        return v


class CustomerRead(BaseModel):
    """Schema for reading a customer from the API."""

    id: UUID
    first_name: str
    last_name: str
    email: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
