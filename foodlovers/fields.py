from __future__ import annotations

from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BeforeValidator, Field


def _check_email(value: str) -> str:
    # Validate the shape only; the address is stored exactly as submitted
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"Invalid email address: {exc}") from exc
    return value


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise pass lax int validation as 1/0
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer")
    return value


Email = Annotated[str, AfterValidator(_check_email)]
Rating = Annotated[int, BeforeValidator(_reject_bool), Field(ge=0, le=5)]
