"""Password entropy estimation backed by zxcvbn."""

from __future__ import annotations

import time
from typing import Any, Final, Iterable

from pydantic import BaseModel, Field
from zxcvbn import zxcvbn

from email_pass.core.logging import get_logger
from email_pass.models.errors import BlankPasswordError, PasswordEntropyError

logger = get_logger(__name__)

# bcrypt only hashes the first 72 bytes of the UTF-8 encoding; zxcvbn refuses
# more than 72 characters, which a 72 byte prefix never exceeds.
ENTROPY_MAX_BYTES: Final[int] = 72


class EntropyFeedback(BaseModel):
    """Human readable hints produced by zxcvbn for weak passwords."""

    warning: str = ""
    suggestions: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "ignore"}


class Entropy(BaseModel):
    """Strength estimate of a password.

    ``score`` ranges from 0 (trivially guessable) to 4 (very unguessable).
    The plaintext and the matched sequences are dropped from zxcvbn's result
    so an estimate can be logged or returned to clients safely.
    """

    score: int = Field(ge=0, le=4)
    guesses_log10: float
    crack_times_display: dict[str, str] = Field(default_factory=dict)
    feedback: EntropyFeedback = Field(default_factory=EntropyFeedback)

    model_config = {"frozen": True, "extra": "ignore"}


def hashed_prefix(password: str) -> str:
    """Return the part of ``password`` that bcrypt actually hashes.

    A multi-byte character split by the cut is dropped.
    """

    return password.encode("utf-8")[:ENTROPY_MAX_BYTES].decode("utf-8", "ignore")


def estimate(password: str, user_inputs: Iterable[str] = ()) -> Entropy:
    """Score ``password`` with zxcvbn.

    ``user_inputs`` are additional words (user name, email, site name) that
    zxcvbn should treat as easily guessable.
    """

    if not password:
        raise BlankPasswordError()

    started = time.perf_counter()
    try:
        result: dict[str, Any] = zxcvbn(hashed_prefix(password), user_inputs=list(user_inputs))
    except (ValueError, ArithmeticError) as exc:
        raise PasswordEntropyError(str(exc)) from exc

    entropy = Entropy.model_validate(result)
    logger.debug(
        "Password entropy estimated",
        {"score": entropy.score, "elapsed_ms": round((time.perf_counter() - started) * 1000, 2)},
    )
    return entropy


__all__ = ["Entropy", "EntropyFeedback", "estimate", "ENTROPY_MAX_BYTES", "hashed_prefix"]
