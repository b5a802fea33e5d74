"""Build password schemes and codecs from runtime settings."""

from __future__ import annotations

from derived_key_passwords.application.ports.password_scheme_port import PasswordSchemePort
from derived_key_passwords.application.services.password_codec import PasswordCodec
from derived_key_passwords.application.services.scheme_registry import PasswordSchemeRegistry
from derived_key_passwords.config.settings import Settings
from derived_key_passwords.infrastructure.security.bcrypt_scheme import BcryptPasswordScheme
from derived_key_passwords.infrastructure.security.pbkdf2_scheme import Pbkdf2PasswordScheme


def build_scheme_registry(settings: Settings) -> PasswordSchemeRegistry:
    """Register every supported scheme configured from settings."""

    schemes: list[PasswordSchemePort] = [
        Pbkdf2PasswordScheme(
            iterations=settings.pbkdf2_iterations,
            digest=settings.pbkdf2_digest,
            salt_bytes=settings.pbkdf2_salt_bytes,
            key_length=settings.pbkdf2_key_length,
        ),
        BcryptPasswordScheme(rounds=settings.bcrypt_rounds),
    ]
    return PasswordSchemeRegistry(schemes)


def build_password_codec(
    settings: Settings,
    *,
    scheme_name: str | None = None,
) -> PasswordCodec:
    """Build a codec for the named scheme, or the one selected in settings."""

    registry = build_scheme_registry(settings)
    return PasswordCodec(scheme=registry.get(scheme_name or settings.password_scheme))
