"""Schema for untrusted RSVP submissions.

A payload is either accepted whole, normalized into a ``GuestSubmission``,
or rejected with a ``ValidationError`` naming every offending field.
"""

import logging
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic import StringConstraints

from src.errors import ValidationError
from src.guests.dtos import GuestSubmission

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 256
PHONE_MAX_LENGTH = 64
MESSAGE_MAX_LENGTH = 500


class GuestSubmissionSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH)
    ]
    email: EmailStr
    phone: Annotated[str, StringConstraints(max_length=PHONE_MAX_LENGTH)] | None = None
    adults: int = Field(default=1, ge=0)
    children: int = Field(default=0, ge=0)
    message: Annotated[str, StringConstraints(max_length=MESSAGE_MAX_LENGTH)] | None = None

    @field_validator("email", mode="before")
    @classmethod
    def _email_length(cls, value: Any) -> Any:
        if isinstance(value, str) and len(value) > EMAIL_MAX_LENGTH:
            raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        return value

    @field_validator("adults", "children", mode="before")
    @classmethod
    def _null_counts_use_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("phone", "message")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        return value or None


def validate_submission(payload: Any) -> GuestSubmission:
    """Validate a raw request body. Raises ValidationError, never returns a partial record."""
    try:
        parsed = GuestSubmissionSchema.model_validate(payload)
    except PydanticValidationError as e:
        fields = [str(error["loc"][0]) if error["loc"] else "body" for error in e.errors()]
        fields = list(dict.fromkeys(fields))
        logger.info("Rejected RSVP submission, invalid fields: %s", fields)
        raise ValidationError(fields) from e

    return GuestSubmission(
        name=parsed.name,
        email=parsed.email,
        phone=parsed.phone,
        adults=parsed.adults,
        children=parsed.children,
        message=parsed.message,
    )
