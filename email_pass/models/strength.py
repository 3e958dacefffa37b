"""Password strength tiers and the configurable strength checker."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Final

from email_pass.core.entropy import Entropy, estimate
from email_pass.core.logging import get_logger
from email_pass.models.errors import PasswordLengthError, UnsafePasswordError

logger = get_logger(__name__)

DEFAULT_MIN_LENGTH: Final[int] = 8


class PasswordStrength(IntEnum):
    """Minimum entropy score a password must reach, ordered from weakest to strongest."""

    LOW = 2
    DEFAULT = 3
    HARD = 4

    @property
    def score(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class PasswordStrengthChecker:
    """Reusable policy combining a minimum length with a minimum strength tier.

    Checkers are immutable; the builder methods return updated copies::

        checker = PasswordStrengthChecker().min_len(20).strength(PasswordStrength.HARD)
        checker.check("my.passphrase.0-9")  # raises PasswordLengthError
    """

    min_length: int = DEFAULT_MIN_LENGTH
    min_strength: PasswordStrength = PasswordStrength.DEFAULT
    user_inputs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ValueError("minimum password length cannot be negative")
        object.__setattr__(self, "min_strength", PasswordStrength(self.min_strength))
        object.__setattr__(self, "user_inputs", tuple(self.user_inputs))

    def min_len(self, min_length: int) -> "PasswordStrengthChecker":
        return replace(self, min_length=min_length)

    def strength(self, strength: PasswordStrength) -> "PasswordStrengthChecker":
        return replace(self, min_strength=strength)

    def known_words(self, *words: str) -> "PasswordStrengthChecker":
        """Return a checker that also penalises passwords built from ``words``.

        Typical inputs are the account's username, email address or the site
        name; blank words are ignored.
        """

        extra = tuple(word for word in words if word)
        return replace(self, user_inputs=self.user_inputs + extra)

    def check(self, password: str) -> Entropy:
        """Validate ``password`` against the policy and return its entropy estimate.

        Raises :class:`PasswordLengthError` when the password is too short,
        :class:`BlankPasswordError` or :class:`PasswordEntropyError` when the
        estimator cannot score it, and :class:`UnsafePasswordError` when the
        score is below the required tier.
        """

        if len(password) < self.min_length:
            raise PasswordLengthError(self.min_length)

        entropy = estimate(password, self.user_inputs)
        if entropy.score < self.min_strength.score:
            logger.debug(
                "Password rejected as too weak",
                {"score": entropy.score, "required": self.min_strength.score},
            )
            raise UnsafePasswordError(self.min_strength)

        return entropy


__all__ = ["PasswordStrength", "PasswordStrengthChecker", "DEFAULT_MIN_LENGTH"]
