"""Password check that transparently upgrades stale records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from derived_key_passwords.application.ports.password_hasher_port import PasswordHasherPort

logger = logging.getLogger(__name__)


class PasswordCheckOutcome(StrEnum):
    """Supported password check outcomes."""

    ACCEPTED = "accepted"
    ACCEPTED_REHASHED = "accepted_rehashed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PasswordCheckResult:
    """Password check result model.

    `password_hash` holds the replacement record when the outcome is
    `ACCEPTED_REHASHED`; the caller is responsible for persisting it.
    """

    outcome: PasswordCheckOutcome
    password_hash: str | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome is not PasswordCheckOutcome.REJECTED


class PasswordUpgradeService:
    """Verify credentials and rehash records whose parameters went stale."""

    def __init__(self, *, password_hasher: PasswordHasherPort) -> None:
        self._password_hasher = password_hasher

    def check(self, *, password: str, password_hash: str) -> PasswordCheckResult:
        """Verify password and return a fresh record when an upgrade is due."""

        is_valid = self._password_hasher.verify_password(
            password=password,
            password_hash=password_hash,
        )
        if not is_valid:
            return PasswordCheckResult(outcome=PasswordCheckOutcome.REJECTED)

        if not self._password_hasher.needs_rehash(password_hash):
            return PasswordCheckResult(outcome=PasswordCheckOutcome.ACCEPTED)

        upgraded = self._password_hasher.hash_password(password)
        logger.info("password_record_rehashed")
        return PasswordCheckResult(
            outcome=PasswordCheckOutcome.ACCEPTED_REHASHED,
            password_hash=upgraded,
        )
