"""Exceptions and error collection for the account workflows."""

from typing import Callable, TypeVar

T = TypeVar("T")

USERNAME_TAKEN = "This username is already taken."
INVALID_CREDENTIALS = "Invalid username or password."
TRY_AGAIN_LATER = "Something went wrong. Please try again later."


class AccountError(Exception):
    """Base class for account workflow failures."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AccountError):
    """A user-correctable problem with a single form field."""


class UsernameTakenError(ValidationError):
    default_message = USERNAME_TAKEN


class AuthError(AccountError):
    """Login failed. The message never says which credential was wrong."""

    default_message = INVALID_CREDENTIALS


class StoreError(AccountError):
    """The user store could not be reached or refused the operation."""

    default_message = TRY_AGAIN_LATER


class FieldErrors(dict):
    """Mapping of field name to the list of messages reported for it."""

    def add(self, field: str, message: str) -> None:
        self.setdefault(field, []).append(message)

    def collect(self, field: str, check: Callable[..., T], *args) -> T | None:
        """Run ``check``; record a ``ValidationError`` under ``field`` instead of raising it.

        Returns the check's result, or ``None`` when it failed. Anything other
        than a ``ValidationError`` propagates.
        """
        try:
            return check(*args)
        except ValidationError as exc:
            self.add(field, exc.message)
            return None

    def merge(self, other: "FieldErrors") -> "FieldErrors":
        for field, messages in other.items():
            for message in messages:
                self.add(field, message)
        return self

    def first(self, field: str) -> str:
        messages = self.get(field)
        return messages[0] if messages else ""
