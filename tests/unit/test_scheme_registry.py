from __future__ import annotations

import pytest

from derived_key_passwords.application.services.scheme_registry import (
    PasswordSchemeRegistry,
    UnknownPasswordSchemeError,
)
from derived_key_passwords.config.settings import Settings
from derived_key_passwords.infrastructure.security.bcrypt_scheme import BcryptPasswordScheme
from derived_key_passwords.infrastructure.security.pbkdf2_scheme import Pbkdf2PasswordScheme
from derived_key_passwords.infrastructure.security.scheme_factory import (
    build_password_codec,
    build_scheme_registry,
)


def test_registry_looks_up_schemes_by_name_in_registration_order() -> None:
    pbkdf2 = Pbkdf2PasswordScheme(iterations=1000)
    bcrypt_scheme = BcryptPasswordScheme(rounds=4)
    registry = PasswordSchemeRegistry([pbkdf2, bcrypt_scheme])

    assert registry.names() == ["pbkdf2", "bcrypt"]
    assert registry.get("bcrypt") is bcrypt_scheme
    assert "pbkdf2" in registry
    assert "argon2" not in registry


def test_registry_rejects_unknown_and_duplicate_names() -> None:
    registry = PasswordSchemeRegistry([Pbkdf2PasswordScheme(iterations=1000)])

    with pytest.raises(UnknownPasswordSchemeError):
        registry.get("argon2")
    with pytest.raises(ValueError):
        registry.register(Pbkdf2PasswordScheme(iterations=2000))


def test_build_scheme_registry_configures_schemes_from_settings() -> None:
    settings = Settings(
        _env_file=None,
        PBKDF2_ITERATIONS=1234,
        PBKDF2_DIGEST="sha512",
        BCRYPT_ROUNDS=5,
    )

    registry = build_scheme_registry(settings)

    pbkdf2_parameters = registry.get("pbkdf2").default_parameters()
    assert pbkdf2_parameters[:3] == ["sha512", "1234", "32"]
    assert registry.get("bcrypt").default_parameters()[0] == "5"


def test_build_password_codec_uses_selected_or_explicit_scheme() -> None:
    settings = Settings(_env_file=None, PASSWORD_SCHEME="bcrypt", BCRYPT_ROUNDS=4)

    assert build_password_codec(settings).scheme.name == "bcrypt"
    assert build_password_codec(settings, scheme_name="pbkdf2").scheme.name == "pbkdf2"
    with pytest.raises(UnknownPasswordSchemeError):
        build_password_codec(settings, scheme_name="md5")
