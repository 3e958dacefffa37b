"""Pydantic schemas carrying validated credentials across I/O boundaries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from email_pass.models.email import Email
from email_pass.models.password import EncryptedPassword, RawPassword
from email_pass.models.strength import PasswordStrengthChecker


class AccountCreate(BaseModel):
    """Credentials submitted when registering an account.

    The password is accepted as any non-empty string; the strength policy is
    applied by :meth:`to_record` so the caller chooses when to pay for it.
    """

    email: Email
    password: RawPassword

    def to_record(
        self,
        cost: int | None = None,
        checker: PasswordStrengthChecker | None = None,
    ) -> "AccountRecord":
        """Check and encrypt the password, consuming it.

        The default policy also penalises passwords derived from the email
        address itself.
        """

        if checker is None:
            checker = PasswordStrengthChecker().known_words(str(self.email), self.email.username)
        encrypted = self.password.custom_check(checker).to_encrypt(cost)
        return AccountRecord(email=self.email, password=encrypted)


class AccountRecord(BaseModel):
    """Credentials in their persisted form."""

    email: Email
    password: EncryptedPassword

    model_config = {"frozen": True}

    def __hash__(self) -> int:
        # Email itself is unhashable; the record owns a private copy of it.
        return hash((str(self.email), self.password))

    def verify_password(self, candidate: RawPassword | str) -> bool:
        if isinstance(candidate, str):
            candidate = RawPassword(candidate)
        return self.password.verify(candidate)

    def to_storage_dict(self) -> dict[str, Any]:
        """Return a dictionary of plain strings ready to be written to a store."""

        return self.model_dump()


__all__ = ["AccountCreate", "AccountRecord"]
