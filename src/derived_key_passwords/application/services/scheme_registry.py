"""Explicit name-to-scheme lookup for password schemes."""

from __future__ import annotations

from collections.abc import Iterable

from derived_key_passwords.application.ports.password_scheme_port import PasswordSchemePort


class UnknownPasswordSchemeError(LookupError):
    """Raised when no scheme is registered under the requested name."""


class PasswordSchemeRegistry:
    """Registry of password schemes keyed by their stable name."""

    def __init__(self, schemes: Iterable[PasswordSchemePort] = ()) -> None:
        self._schemes: dict[str, PasswordSchemePort] = {}
        for scheme in schemes:
            self.register(scheme)

    def register(self, scheme: PasswordSchemePort) -> None:
        name = scheme.name.strip()
        if not name:
            raise ValueError("scheme name cannot be blank")
        if name in self._schemes:
            raise ValueError(f"scheme {name!r} is already registered")
        self._schemes[name] = scheme

    def get(self, name: str) -> PasswordSchemePort:
        try:
            return self._schemes[name]
        except KeyError as exc:
            raise UnknownPasswordSchemeError(f"unknown password scheme {name!r}") from exc

    def names(self) -> list[str]:
        return list(self._schemes)

    def __contains__(self, name: object) -> bool:
        return name in self._schemes
