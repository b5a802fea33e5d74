"""PBKDF2-HMAC password scheme."""

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Sequence

from derived_key_passwords.application.ports.password_scheme_port import PasswordSchemePort
from derived_key_passwords.domain.passwords.errors import InvalidParameterValue
from derived_key_passwords.domain.passwords.record import require_parameter_count

SUPPORTED_DIGESTS = ("sha256", "sha512")
MAX_ITERATIONS = 10_000_000
MAX_KEY_LENGTH = 128
_PARAMETER_COUNT = 4


def _parse_positive_int(value: str, *, field: str, maximum: int) -> int:
    if not value.isdecimal():
        raise InvalidParameterValue(f"{field} must be a decimal integer")
    parsed = int(value)
    if not 0 < parsed <= maximum:
        raise InvalidParameterValue(f"{field} must be between 1 and {maximum}")
    return parsed


class Pbkdf2PasswordScheme(PasswordSchemePort):
    """Password scheme backed by `hashlib.pbkdf2_hmac`.

    Parameters are ``[digest, iterations, key_length, salt_hex]`` and the
    derived key is hex encoded, so no field can contain the record delimiter.
    """

    name = "pbkdf2"

    def __init__(
        self,
        *,
        iterations: int,
        digest: str = "sha256",
        salt_bytes: int = 16,
        key_length: int = 32,
    ) -> None:
        if digest not in SUPPORTED_DIGESTS:
            raise ValueError(f"unsupported digest {digest!r}")
        if not 0 < iterations <= MAX_ITERATIONS:
            raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}")
        if salt_bytes < 8:
            raise ValueError("salt_bytes must be at least 8")
        if not 0 < key_length <= MAX_KEY_LENGTH:
            raise ValueError(f"key_length must be between 1 and {MAX_KEY_LENGTH}")
        self._iterations = iterations
        self._digest = digest
        self._salt_bytes = salt_bytes
        self._key_length = key_length

    def default_parameters(self) -> list[str]:
        return [
            self._digest,
            str(self._iterations),
            str(self._key_length),
            secrets.token_bytes(self._salt_bytes).hex(),
        ]

    def derive_key(self, parameters: Sequence[str], password: str) -> str:
        digest, iterations, key_length, salt = self._parse(parameters)
        derived = hashlib.pbkdf2_hmac(
            digest,
            password.encode("utf-8", errors="surrogatepass"),
            salt,
            iterations,
            dklen=key_length,
        )
        return derived.hex()

    def is_preferred_parameters(self, parameters: Sequence[str]) -> bool:
        if len(parameters) != _PARAMETER_COUNT:
            return False
        digest, iterations, key_length, salt_hex = parameters
        return (
            digest == self._digest
            and iterations == str(self._iterations)
            and key_length == str(self._key_length)
            and len(salt_hex) >= self._salt_bytes * 2
        )

    def _parse(self, parameters: Sequence[str]) -> tuple[str, int, int, bytes]:
        digest, iterations, key_length, salt_hex = require_parameter_count(
            parameters, _PARAMETER_COUNT
        )
        if digest not in SUPPORTED_DIGESTS:
            raise InvalidParameterValue(f"unsupported digest {digest!r}")
        try:
            salt = bytes.fromhex(salt_hex)
        except ValueError as exc:
            raise InvalidParameterValue("salt is not valid hex") from exc
        if not salt:
            raise InvalidParameterValue("salt is empty")
        return (
            digest,
            _parse_positive_int(iterations, field="iterations", maximum=MAX_ITERATIONS),
            _parse_positive_int(key_length, field="key_length", maximum=MAX_KEY_LENGTH),
            salt,
        )
