"""Exception types raised by the email and password value objects.

Email and password failures form two separate families so callers only
match the errors relevant to the value they are building. Both derive from
:class:`ValueError`, which lets pydantic report them as validation errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import for annotations only
    from email_pass.models.strength import PasswordStrength


class EmailError(ValueError):
    """Base class for every email validation failure."""


class EmailFormatError(EmailError):
    def __init__(self, value: str) -> None:
        super().__init__("email must look like 'username@domain.tld'")
        self.value = value


class EmailLengthError(EmailError):
    """The email (or its parts combined) is outside the allowed length."""

    def __init__(self, length: int, min_length: int, max_length: int) -> None:
        super().__init__(
            f"email must contain between {min_length} and {max_length} characters, got {length}"
        )
        self.length = length
        self.min_length = min_length
        self.max_length = max_length


class EmailUsernameError(EmailError):
    def __init__(self, username: str) -> None:
        super().__init__(
            "email username may only contain letters, digits and the characters '_', '.', '+', '-'"
        )
        self.username = username


class EmailDomainError(EmailError):
    def __init__(self, domain: str) -> None:
        super().__init__(
            "email domain must contain at least one '.' and only letters, digits, '-' and '.'"
        )
        self.domain = domain


class PasswordError(ValueError):
    """Base class for every password validation failure."""


class PasswordLengthError(PasswordError):
    """The raw password is shorter than the policy minimum."""

    def __init__(self, min_length: int) -> None:
        super().__init__(f"password must contain at least {min_length} characters")
        self.min_length = min_length


class BlankPasswordError(PasswordError):
    def __init__(self) -> None:
        super().__init__("password must not be blank")


class PasswordEntropyError(PasswordError):
    """The entropy estimator failed while scoring the password."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"password strength could not be estimated: {reason}")
        self.reason = reason


class UnsafePasswordError(PasswordError):
    """The password scored below the required strength tier."""

    def __init__(self, strength: "PasswordStrength") -> None:
        super().__init__(f"password is too weak, {strength.label} strength is required")
        self.strength = strength


class PasswordNotEncryptedError(PasswordError):
    def __init__(self) -> None:
        # Offending text is not stored; it may be a plaintext password.
        super().__init__("value is not a hashed password of the form '$<algorithm>$<cost>$<hash>'")


class PasswordConsumedError(PasswordError):
    def __init__(self) -> None:
        super().__init__("raw password was already encrypted and can no longer be used")


class HashError(RuntimeError):
    """The hashing backend failed to hash or verify a password.

    The backend exception is kept as ``__cause__``.
    """


class HashCostError(HashError, ValueError):
    """The requested work factor is outside the configured bounds."""

    def __init__(self, cost: int, min_cost: int, max_cost: int) -> None:
        super().__init__(f"hash cost must be between {min_cost} and {max_cost}, got {cost}")
        self.cost = cost
        self.min_cost = min_cost
        self.max_cost = max_cost


__all__ = [
    "EmailError",
    "EmailFormatError",
    "EmailLengthError",
    "EmailUsernameError",
    "EmailDomainError",
    "PasswordError",
    "PasswordLengthError",
    "BlankPasswordError",
    "PasswordEntropyError",
    "UnsafePasswordError",
    "PasswordNotEncryptedError",
    "PasswordConsumedError",
    "HashError",
    "HashCostError",
]
