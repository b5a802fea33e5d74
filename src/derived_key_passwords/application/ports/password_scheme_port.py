"""Port for pluggable key-derivation schemes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class PasswordSchemePort(Protocol):
    """Key-derivation contract driven by `PasswordCodec`.

    Implementations receive parameters as plain strings in the order they
    emitted them from `default_parameters` and never parse stored records
    themselves. Bad parameters are reported by raising a
    `PasswordRecordError` subclass from `derive_key`.
    """

    name: str

    def derive_key(self, parameters: Sequence[str], password: str) -> str:
        """Return the derived key for password under the given parameters."""

    def default_parameters(self) -> list[str]:
        """Return parameters for a new record, with a freshly generated salt."""

    def is_preferred_parameters(self, parameters: Sequence[str]) -> bool:
        """Return whether parameters match the current configuration."""

        _ = parameters
        return True
