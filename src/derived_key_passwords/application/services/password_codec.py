"""Generic hashing, verification and staleness checks over a password scheme."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from enum import StrEnum

from derived_key_passwords.application.ports.password_hasher_port import PasswordHasherPort
from derived_key_passwords.application.ports.password_scheme_port import PasswordSchemePort
from derived_key_passwords.domain.passwords.errors import (
    PasswordRecordError,
    SchemeProgrammingError,
)
from derived_key_passwords.domain.passwords.record import join_record, split_record

logger = logging.getLogger(__name__)


class VerificationOutcome(StrEnum):
    """Supported verification outcomes."""

    MATCH = "match"
    MISMATCH = "mismatch"
    INVALID_RECORD = "invalid_record"


@dataclass(frozen=True)
class VerificationResult:
    """Verification result model."""

    outcome: VerificationOutcome
    error: PasswordRecordError | None = None

    @property
    def is_match(self) -> bool:
        return self.outcome is VerificationOutcome.MATCH


class PasswordCodec(PasswordHasherPort):
    """Serialize scheme parameters with derived keys and compare them back.

    Records have the form ``param_1:...:param_n:derived_key``. The codec owns
    all parsing; the scheme only sees parameter lists.
    """

    def __init__(self, *, scheme: PasswordSchemePort) -> None:
        self._scheme = scheme

    @property
    def scheme(self) -> PasswordSchemePort:
        return self._scheme

    def hash_password(self, password: str) -> str:
        """Derive a key under fresh default parameters and serialize it."""

        scheme_name = self._scheme.name
        try:
            parameters = self._scheme.default_parameters()
        except PasswordRecordError as exc:
            logger.error("password_default_parameters_failed scheme=%s", scheme_name)
            raise SchemeProgrammingError(
                f"{scheme_name} default_parameters() failed: {exc}"
            ) from exc

        try:
            derived_key = self._scheme.derive_key(parameters, password)
        except PasswordRecordError as exc:
            logger.error("password_default_derivation_failed scheme=%s", scheme_name)
            raise SchemeProgrammingError(
                f"{scheme_name} derive_key() rejected its own default parameters: {exc}"
            ) from exc

        try:
            return join_record(parameters, derived_key)
        except SchemeProgrammingError:
            logger.error("password_record_serialization_failed scheme=%s", scheme_name)
            raise

    def verify(self, *, password: str, password_hash: str) -> VerificationResult:
        """Compare password against a stored record without raising on bad records."""

        try:
            parameters, expected_key = split_record(password_hash)
            derived_key = self._scheme.derive_key(parameters, password)
        except PasswordRecordError as exc:
            logger.warning(
                "password_record_invalid scheme=%s error_type=%s",
                self._scheme.name,
                type(exc).__name__,
            )
            return VerificationResult(outcome=VerificationOutcome.INVALID_RECORD, error=exc)

        if hmac.compare_digest(
            derived_key.encode("utf-8", errors="surrogatepass"),
            expected_key.encode("utf-8", errors="surrogatepass"),
        ):
            return VerificationResult(outcome=VerificationOutcome.MATCH)
        return VerificationResult(outcome=VerificationOutcome.MISMATCH)

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        return self.verify(password=password, password_hash=password_hash).is_match

    def needs_rehash(self, password_hash: str) -> bool:
        """Return whether record parameters differ from the scheme's preferred ones."""

        try:
            parameters, _ = split_record(password_hash)
        except PasswordRecordError:
            return True
        return not self._scheme.is_preferred_parameters(parameters)
