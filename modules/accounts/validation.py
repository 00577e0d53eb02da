"""Field validators for the signup and login forms.

Each validator takes the raw submitted value, returns the cleaned value and
raises ``ValidationError`` with a user-facing message when it is not usable.
"""

import re

from email_validator import EmailNotValidError, validate_email

from .errors import ValidationError

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_]+", re.ASCII)
PASSWORD_MIN_LENGTH = 6


def clean(value: str | None) -> str:
    return (value or "").strip()


def require(value: str | None, message: str) -> str:
    cleaned = clean(value)
    if not cleaned:
        raise ValidationError(message)
    return cleaned


def check_username(value: str | None) -> str:
    username = require(value, "Please enter a username.")
    if not USERNAME_PATTERN.fullmatch(username):
        raise ValidationError("Username can only contain letters, numbers, and underscores.")
    return username


def check_email(value: str | None) -> str:
    email = require(value, "Please enter an email.")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError("Invalid email format.") from exc
    return email


def check_password(value: str | None) -> str:
    password = require(value, "Please enter a password.")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"Password must have at least {PASSWORD_MIN_LENGTH} characters.")
    return password


def check_confirmation(value: str | None, password: str | None) -> str:
    """``password`` is the already validated password, or ``None`` if it failed."""
    confirmation = require(value, "Please confirm password.")
    if password is not None and confirmation != password:
        raise ValidationError("Password did not match.")
    return confirmation
