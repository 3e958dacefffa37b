"""Validated email address value object."""

from __future__ import annotations

import re
from typing import Any, Final

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from email_pass.models.errors import (
    EmailDomainError,
    EmailFormatError,
    EmailLengthError,
    EmailUsernameError,
)

EMAIL_MIN_LENGTH: Final[int] = 6
EMAIL_MAX_LENGTH: Final[int] = 254

_USERNAME_PATTERN = r"[A-Za-z0-9_.+-]+"
_DOMAIN_PATTERN = r"[A-Za-z0-9-]+\.[A-Za-z0-9-.]+"

# Compiled once; the same character classes back both construction paths.
_USERNAME_RE: Final[re.Pattern[str]] = re.compile(_USERNAME_PATTERN)
_DOMAIN_RE: Final[re.Pattern[str]] = re.compile(_DOMAIN_PATTERN)
_EMAIL_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<local>{_USERNAME_PATTERN})@(?P<domain>{_DOMAIN_PATTERN})"
)


def _check_length(length: int) -> None:
    if not EMAIL_MIN_LENGTH <= length <= EMAIL_MAX_LENGTH:
        raise EmailLengthError(length, EMAIL_MIN_LENGTH, EMAIL_MAX_LENGTH)


def _check_username(username: str) -> None:
    if not _USERNAME_RE.fullmatch(username):
        raise EmailUsernameError(username)


def _check_domain(domain: str) -> None:
    if not _DOMAIN_RE.fullmatch(domain):
        raise EmailDomainError(domain)


class Email:
    """An email address split into its username (local part) and domain.

    ``len(username) + len(domain)`` always lies between 6 and 254 and both
    parts match their character classes. The invariant is enforced when the
    address is built and again by :meth:`set_username` and :meth:`set_domain`.
    """

    __slots__ = ("_local", "_domain")

    def __init__(self, username: str, domain: str) -> None:
        _check_length(len(username) + len(domain))
        _check_username(username)
        _check_domain(domain)

        self._local = username
        self._domain = domain

    @classmethod
    def build(cls, username: str, domain: str) -> "Email":
        """Create an address from its parts, validating length before format."""

        return cls(username, domain)

    @classmethod
    def parse(cls, email: str) -> "Email":
        """Create an address from its ``username@domain`` text form."""

        _check_length(len(email))

        match = _EMAIL_RE.fullmatch(email)
        if match is None:
            raise EmailFormatError(email)

        return cls(match.group("local"), match.group("domain"))

    @property
    def username(self) -> str:
        return self._local

    @property
    def local(self) -> str:
        return self._local

    @property
    def domain(self) -> str:
        return self._domain

    def set_username(self, username: str) -> None:
        """Replace the username; the address is left untouched if validation fails."""

        _check_length(len(username) + len(self._domain))
        _check_username(username)
        self._local = username

    def set_domain(self, domain: str) -> None:
        """Replace the domain; the address is left untouched if validation fails."""

        _check_length(len(self._local) + len(domain))
        _check_domain(domain)
        self._domain = domain

    def copy(self) -> "Email":
        return Email(self._local, self._domain)

    __copy__ = copy

    def __str__(self) -> str:
        return f"{self._local}@{self._domain}"

    def __repr__(self) -> str:
        return f"Email({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self._local == other._local and self._domain == other._domain

    # Mutable through the setters, so not usable as a dict key.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [
                    # Models hold their own copy of an address.
                    core_schema.no_info_after_validator_function(
                        cls.copy, core_schema.is_instance_schema(cls)
                    ),
                    from_str,
                ]
            ),
            serialization=core_schema.to_string_ser_schema(when_used="always"),
        )


__all__ = ["Email", "EMAIL_MIN_LENGTH", "EMAIL_MAX_LENGTH"]
