# hopeshare/application/site/forms.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hopeshare.application.content.collection import Collection
from hopeshare.domain.invariants.exceptions import InvariantViolation
from hopeshare.utils.transaction import transactional

logger = logging.getLogger(__name__)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PHONE_PATTERN = r"^[0-9\-+() ]{8,20}$"


class FormSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def blank_optional_to_none(cls, value, info):
        # Blank optional inputs are treated as not provided
        field = cls.model_fields[info.field_name]
        if isinstance(value, str) and not value.strip() and not field.is_required():
            return None
        return value


class ContactForm(FormSchema):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254, pattern=EMAIL_PATTERN)
    subject: Optional[str] = Field(default=None, max_length=200)
    message: str = Field(min_length=1, max_length=2000)


class DonationForm(FormSchema):
    name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    email: Optional[str] = Field(default=None, max_length=254, pattern=EMAIL_PATTERN)
    donation_type: str = Field(min_length=1, max_length=50)
    message: Optional[str] = Field(default=None, max_length=1000)


class VolunteerForm(FormSchema):
    name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, pattern=PHONE_PATTERN)
    email: str = Field(max_length=254, pattern=EMAIL_PATTERN)
    availability: Optional[str] = Field(default=None, max_length=500)
    message: Optional[str] = Field(default=None, max_length=2000)


# form name -> (schema, inbox collection)
FORMS: Dict[str, Tuple[Type[FormSchema], str]] = {
    "contact": (ContactForm, "contact_messages"),
    "donation": (DonationForm, "donation_inquiries"),
    "volunteer": (VolunteerForm, "volunteer_applications"),
}


def validate_form(schema: Type[FormSchema], payload: Dict[str, Any]) -> FormSchema:
    """
    Validates before any write. Only the first failing field is reported.
    """
    try:
        return schema.model_validate(payload or {})
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        if first["type"] == "missing":
            message = f"{field} is required"
        else:
            message = f"Invalid {field}: {first['msg']}"
        raise InvariantViolation(message, field=field) from exc


def submit_form(form: str, payload: Dict[str, Any]):
    """Validate a public form and store it as one inbox row."""
    schema, collection = FORMS[form]
    submission = validate_form(schema, payload)

    store = Collection(collection)
    with transactional():
        row = store.insert(submission.model_dump())

    logger.info("Stored %s submission %s", form, row.id)
    return row
