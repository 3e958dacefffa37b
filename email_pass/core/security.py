"""bcrypt hashing and verification backed by passlib."""

from __future__ import annotations

import re
import time
from typing import Final

from passlib.context import CryptContext

from email_pass.core.config import BCRYPT_MAX_COST, PasswordSettings, get_settings
from email_pass.core.logging import get_logger
from email_pass.models.errors import HashCostError, HashError

logger = get_logger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
_bcrypt = _pwd_context.handler("bcrypt")

# ``$<algorithm>$<cost>$<salt and digest>``, the shape of modular crypt hashes.
HASHED_PASSWORD_RE: Final[re.Pattern[str]] = re.compile(r"^\$[a-z0-9]+\$[a-z0-9]+\$.*")


def looks_hashed(value: str) -> bool:
    """Return ``True`` when ``value`` has the shape of a modular crypt hash."""

    return HASHED_PASSWORD_RE.match(value) is not None


def check_cost(cost: int, settings: PasswordSettings | None = None) -> int:
    """Validate a bcrypt work factor against the configured bounds."""

    settings = settings or get_settings()
    if isinstance(cost, bool) or not isinstance(cost, int):
        raise TypeError(f"hash cost must be an integer, got {type(cost).__name__}")
    if not settings.min_cost <= cost <= BCRYPT_MAX_COST:
        raise HashCostError(cost, settings.min_cost, BCRYPT_MAX_COST)
    return cost


def hash_password(password: str, cost: int | None = None) -> str:
    """Hash ``password`` with bcrypt using ``cost`` rounds.

    ``cost`` defaults to ``PasswordSettings.default_cost``. No strength
    validation happens here.
    """

    settings = get_settings()
    rounds = check_cost(settings.default_cost if cost is None else cost, settings)

    started = time.perf_counter()
    try:
        password_hash = _bcrypt.using(rounds=rounds).hash(password)
    except (ValueError, TypeError) as exc:
        raise HashError(f"password hashing failed: {exc}") from exc

    logger.debug(
        "Password hashed",
        {"scheme": "bcrypt", "cost": rounds, "elapsed_ms": round((time.perf_counter() - started) * 1000, 2)},
    )
    return password_hash


def verify_password(password: str, password_hash: str) -> bool:
    """Return ``True`` when ``password`` corresponds to ``password_hash``.

    A mismatch is ``False``. A hash passlib cannot identify or parse raises
    :class:`HashError`.
    """

    started = time.perf_counter()
    try:
        matched = _pwd_context.verify(password, password_hash)
    except (ValueError, TypeError) as exc:
        # Passlib raises ValueError when the hash is invalid/malformed.
        raise HashError(f"password verification failed: {exc}") from exc

    logger.debug(
        "Password verified",
        {"matched": matched, "elapsed_ms": round((time.perf_counter() - started) * 1000, 2)},
    )
    return matched


__all__ = ["HASHED_PASSWORD_RE", "check_cost", "hash_password", "looks_hashed", "verify_password"]
