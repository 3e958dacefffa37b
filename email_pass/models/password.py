"""Password value objects encoding their lifecycle in their type.

A password starts as a :class:`RawPassword` holding user supplied plaintext.
Only a raw password can be strength checked and encrypted; encrypting it
yields an :class:`EncryptedPassword`, the only form that can be verified,
printed or persisted. The two classes share no public methods, so a hash can
never be strength checked and plaintext can never be stored by mistake::

    raw = Password.new(form_value)
    stored = raw.check().to_encrypt()
    ...
    Password.from_encrypt(row["password"]).verify(Password.new(attempt))
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from email_pass.core.config import get_settings
from email_pass.core.security import hash_password, looks_hashed, verify_password
from email_pass.models.errors import PasswordConsumedError, PasswordNotEncryptedError
from email_pass.models.strength import PasswordStrengthChecker

SECRET_MASK: Final[str] = "**********"


class RawPassword:
    """Unverified plaintext password.

    Construction performs no validation; call :meth:`check` or
    :meth:`custom_check` to enforce a strength policy. Encrypting consumes the
    instance: the plaintext is released and further use raises
    :class:`PasswordConsumedError`. Take a :meth:`copy` first when the
    plaintext is still needed, e.g. to verify it against the new hash.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"password must be a string, got {type(value).__name__}")
        self._value: str | None = value

    def _plaintext(self) -> str:
        if self._value is None:
            raise PasswordConsumedError()
        return self._value

    @property
    def is_consumed(self) -> bool:
        return self._value is None

    def check(self) -> "RawPassword":
        """Enforce the default policy (8 characters, ``DEFAULT`` strength)."""

        return self.custom_check(PasswordStrengthChecker())

    def custom_check(self, checker: PasswordStrengthChecker) -> "RawPassword":
        """Enforce ``checker``'s policy and return this same password."""

        checker.check(self._plaintext())
        return self

    def to_encrypt(self, cost: int | None = None) -> "EncryptedPassword":
        """Hash the plaintext with bcrypt and consume this instance.

        No strength check is performed; chain ``check().to_encrypt()`` for
        both. ``cost`` defaults to the configured ``default_cost``.
        """

        encrypted = EncryptedPassword(hash_password(self._plaintext(), cost))
        self._value = None
        return encrypted

    def to_encrypt_default(self) -> "EncryptedPassword":
        return self.to_encrypt(get_settings().default_cost)

    def to_encrypt_with_cost(self, cost: int) -> "EncryptedPassword":
        return self.to_encrypt(cost)

    def copy(self) -> "RawPassword":
        return RawPassword(self._plaintext())

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> "RawPassword":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawPassword) or self.is_consumed or other.is_consumed:
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return SECRET_MASK

    def __repr__(self) -> str:
        state = "consumed" if self.is_consumed else SECRET_MASK
        return f"RawPassword({state!r})"

    def __reduce__(self) -> Any:
        raise TypeError("raw passwords cannot be pickled")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema(min_length=1)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda _: SECRET_MASK),
        )


class EncryptedPassword:
    """bcrypt hash of a password, safe to print and persist."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str) or not looks_hashed(value):
            raise PasswordNotEncryptedError()
        self._value = value

    @classmethod
    def from_encrypt(cls, value: str) -> "EncryptedPassword":
        """Wrap trusted hash text, e.g. loaded from storage.

        Only the ``$<algorithm>$<cost>$...`` shape is checked; no strength
        policy applies since the plaintext is unknown.
        """

        return cls(value)

    def verify(self, candidate: RawPassword) -> bool:
        """Return whether ``candidate`` is the password this hash was made from.

        A wrong password returns ``False``; a hash the backend cannot parse
        raises :class:`HashError`.
        """

        if not isinstance(candidate, RawPassword):
            raise TypeError("only a RawPassword can be verified against an encrypted password")
        return verify_password(candidate._plaintext(), self._value)

    def verify_from_raw(self, raw: str) -> bool:
        return self.verify(RawPassword(raw))

    def as_str(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"EncryptedPassword({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncryptedPassword):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls.from_encrypt, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.to_string_ser_schema(when_used="always"),
        )


class Password:
    """Entry points for building password values."""

    @staticmethod
    def new(raw_password: str) -> RawPassword:
        return RawPassword(raw_password)

    @staticmethod
    def from_raw(raw_password: str) -> RawPassword:
        return RawPassword(raw_password)

    @staticmethod
    def from_encrypt(encrypted_password: str) -> EncryptedPassword:
        return EncryptedPassword.from_encrypt(encrypted_password)


__all__ = ["Password", "RawPassword", "EncryptedPassword", "SECRET_MASK"]
