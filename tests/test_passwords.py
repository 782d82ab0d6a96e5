"""Tests for password hashing."""

from photoshare.services.passwords import hash_password, verify_password


def test_hash_is_not_plaintext_and_verifies() -> None:
    stored = hash_password("secret123", rounds=4)

    assert stored != "secret123"
    assert verify_password(stored, "secret123")
    assert not verify_password(stored, "secret124")


def test_verify_rejects_missing_or_malformed_hash() -> None:
    assert not verify_password(None, "secret123")
    assert not verify_password("", "secret123")
    assert not verify_password("not-a-bcrypt-hash", "secret123")


def test_long_passwords_are_accepted() -> None:
    password = "x" * 100
    stored = hash_password(password, rounds=4)

    assert verify_password(stored, password)
