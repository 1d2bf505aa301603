"""
Input validation shared by use cases.

Errors are collected per field so the API can answer with the same
formErrors / fieldErrors shape it uses for request-body validation.
"""

from typing import Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from src.domain.result import Error, Result, Return

VALIDATION_ERROR = "VALIDATION_ERROR"
MIN_PASSWORD_LENGTH = 6
MIN_RESET_TOKEN_LENGTH = 10


class FieldErrors:
    def __init__(self):
        self.field_errors: Dict[str, List[str]] = {}
        self.form_errors: List[str] = []

    def add(self, field: Optional[str], message: str) -> None:
        if field is None:
            self.form_errors.append(message)
        else:
            self.field_errors.setdefault(field, []).append(message)

    def check_email(self, field: str, value: str) -> None:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            self.add(field, "Invalid email address")

    def check_min_length(self, field: str, value: str, minimum: int) -> None:
        if len(value) < minimum:
            self.add(field, f"Must be at least {minimum} characters long")

    def result(self) -> Result[None]:
        if self.field_errors or self.form_errors:
            return Return.err(validation_error(self.field_errors, self.form_errors))
        return Return.ok(None)


def validation_error(
    field_errors: Dict[str, List[str]], form_errors: Optional[List[str]] = None
) -> Error:
    return Error(
        VALIDATION_ERROR,
        "Validation failed",
        details={"formErrors": form_errors or [], "fieldErrors": field_errors},
    )


def ensure_email(value: str) -> str:
    """Reject a malformed address but keep the value exactly as sent"""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError("Invalid email address") from exc
    return value
