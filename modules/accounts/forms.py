"""Typed form inputs, built once at the request boundary."""

from dataclasses import dataclass, fields
from typing import Mapping


class _FormMixin:
    @classmethod
    def from_mapping(cls, data: Mapping[str, str]):
        """Pick the known fields out of ``data``; absent keys become ``None``."""
        return cls(**{f.name: data.get(f.name) for f in fields(cls)})


@dataclass(frozen=True)
class RegistrationForm(_FormMixin):
    username: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None


@dataclass(frozen=True)
class LoginForm(_FormMixin):
    username: str | None = None
    password: str | None = None
