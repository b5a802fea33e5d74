from __future__ import annotations

from derived_key_passwords.application.services.password_codec import PasswordCodec
from derived_key_passwords.application.services.password_upgrade_service import (
    PasswordCheckOutcome,
    PasswordUpgradeService,
)
from derived_key_passwords.infrastructure.security.pbkdf2_scheme import Pbkdf2PasswordScheme


class FakePasswordHasher:
    def __init__(self, *, should_verify: bool, stale: bool) -> None:
        self.should_verify = should_verify
        self.stale = stale
        self.verify_calls: list[tuple[str, str]] = []
        self.rehash_checks: list[str] = []
        self.hash_calls: list[str] = []

    def hash_password(self, password: str) -> str:
        self.hash_calls.append(password)
        return f"new::{password}"

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        self.verify_calls.append((password, password_hash))
        return self.should_verify

    def needs_rehash(self, password_hash: str) -> bool:
        self.rehash_checks.append(password_hash)
        return self.stale


def test_check_rejects_wrong_password_without_rehash_check() -> None:
    hasher = FakePasswordHasher(should_verify=False, stale=True)
    service = PasswordUpgradeService(password_hasher=hasher)

    result = service.check(password="wrong", password_hash="old")

    assert result.outcome is PasswordCheckOutcome.REJECTED
    assert result.accepted is False
    assert result.password_hash is None
    assert hasher.verify_calls == [("wrong", "old")]
    assert hasher.rehash_checks == []
    assert hasher.hash_calls == []


def test_check_accepts_current_record_without_rehashing() -> None:
    hasher = FakePasswordHasher(should_verify=True, stale=False)
    service = PasswordUpgradeService(password_hasher=hasher)

    result = service.check(password="pw", password_hash="old")

    assert result.outcome is PasswordCheckOutcome.ACCEPTED
    assert result.accepted is True
    assert result.password_hash is None
    assert hasher.rehash_checks == ["old"]
    assert hasher.hash_calls == []


def test_check_rehashes_stale_record_after_successful_verification() -> None:
    hasher = FakePasswordHasher(should_verify=True, stale=True)
    service = PasswordUpgradeService(password_hasher=hasher)

    result = service.check(password="pw", password_hash="old")

    assert result.outcome is PasswordCheckOutcome.ACCEPTED_REHASHED
    assert result.accepted is True
    assert result.password_hash == "new::pw"
    assert hasher.hash_calls == ["pw"]


def test_check_upgrades_pbkdf2_iteration_count() -> None:
    old_codec = PasswordCodec(scheme=Pbkdf2PasswordScheme(iterations=1000))
    new_codec = PasswordCodec(scheme=Pbkdf2PasswordScheme(iterations=2000))
    old_record = old_codec.hash_password("correct horse")

    result = PasswordUpgradeService(password_hasher=new_codec).check(
        password="correct horse",
        password_hash=old_record,
    )

    assert result.outcome is PasswordCheckOutcome.ACCEPTED_REHASHED
    assert result.password_hash is not None
    assert result.password_hash.split(":")[1] == "2000"
    assert new_codec.needs_rehash(result.password_hash) is False
    assert new_codec.verify_password(
        password="correct horse",
        password_hash=result.password_hash,
    ) is True
