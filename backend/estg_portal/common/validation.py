"""
Input validation and sanitization for form submissions.
"""
import re
from typing import Iterable, Mapping

from ..constants import MSG_FILL_REQUIRED
from .exceptions import ValidationError


def sanitize_string(value: str, max_length: int = None, min_length: int = 0, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        raise ValidationError("Value must be a string")
    value = value.strip()
    if allow_empty and len(value) == 0:
        return value
    if min_length > 0 and len(value) < min_length:
        raise ValidationError(f"Must be at least {min_length} characters long")
    if max_length and len(value) > max_length:
        raise ValidationError(f"Must be at most {max_length} characters long")
    # Control characters never belong in titles or descriptions (newlines and tabs do)
    return re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '', value)


def validate_email(email: str) -> str:
    if not isinstance(email, str):
        raise ValidationError("Email must be a string")
    email = email.strip().lower()
    email_regex = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    if not re.match(email_regex, email):
        raise ValidationError("Invalid email address")
    if len(email) > 254:
        raise ValidationError("Email address is too long")
    return email


def validate_password_match(password: str, confirmation: str) -> str:
    if not password:
        raise ValidationError("Password cannot be empty")
    if password != confirmation:
        raise ValidationError("Passwords do not match")
    return password


def require_fields(form: Mapping, names: Iterable[str]) -> dict:
    """
    Returns the stripped values of the required fields.

    Raises:
        ValidationError: at least one field is missing or blank; `details['missing']` lists them
    """
    values = {}
    missing = []
    for name in names:
        value = form.get(name)
        value = value.strip() if isinstance(value, str) else value
        if not value:
            missing.append(name)
        values[name] = value
    if missing:
        raise ValidationError(MSG_FILL_REQUIRED, {'missing': missing})
    return values
