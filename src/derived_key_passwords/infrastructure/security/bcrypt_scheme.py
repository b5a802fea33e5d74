"""Bcrypt password scheme adapter."""

from __future__ import annotations

import re
from collections.abc import Sequence

import bcrypt

from derived_key_passwords.application.ports.password_scheme_port import PasswordSchemePort
from derived_key_passwords.domain.passwords.errors import InvalidParameterValue
from derived_key_passwords.domain.passwords.record import require_parameter_count

MIN_ROUNDS = 4
MAX_ROUNDS = 31
# bcrypt only reads the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72
_SALT_PATTERN = re.compile(r"[./A-Za-z0-9]{22}")
_CHECKSUM_LENGTH = 31
_PARAMETER_COUNT = 2


class BcryptPasswordScheme(PasswordSchemePort):
    """Password scheme using bcrypt with the cost and salt kept as parameters.

    Parameters are ``[rounds, salt]`` where salt is the 22-character bcrypt
    salt; the derived key is the 31-character bcrypt checksum.
    """

    name = "bcrypt"

    def __init__(self, *, rounds: int = 12) -> None:
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")
        self._rounds = rounds

    def default_parameters(self) -> list[str]:
        setting = bcrypt.gensalt(rounds=self._rounds).decode("ascii")
        return [str(self._rounds), setting.rsplit("$", 1)[-1]]

    def derive_key(self, parameters: Sequence[str], password: str) -> str:
        rounds, salt = require_parameter_count(parameters, _PARAMETER_COUNT)
        if not rounds.isdecimal() or not MIN_ROUNDS <= int(rounds) <= MAX_ROUNDS:
            raise InvalidParameterValue(
                f"rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}"
            )
        if not _SALT_PATTERN.fullmatch(salt):
            raise InvalidParameterValue("salt is not a 22-character bcrypt salt")

        setting = f"$2b${int(rounds):02d}${salt}".encode("ascii")
        encoded = password.encode("utf-8", errors="surrogatepass")[:MAX_PASSWORD_BYTES]
        try:
            hashed = bcrypt.hashpw(encoded, setting)
        except ValueError as exc:
            raise InvalidParameterValue("bcrypt rejected parameters") from exc
        return hashed.decode("ascii")[-_CHECKSUM_LENGTH:]

    def is_preferred_parameters(self, parameters: Sequence[str]) -> bool:
        if len(parameters) != _PARAMETER_COUNT:
            return False
        return parameters[0] == str(self._rounds)
