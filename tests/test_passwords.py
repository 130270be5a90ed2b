# tests/test_passwords.py

from __future__ import annotations

from auth.passwords import hash_password, verify_password


def test_hash_is_salted() -> None:
    a = hash_password("secret")
    b = hash_password("secret")
    assert a != b
    assert verify_password("secret", a)
    assert verify_password("secret", b)


def test_verify_rejects_wrong_password() -> None:
    assert not verify_password("nope", hash_password("secret"))


def test_verify_rejects_malformed_hash() -> None:
    assert not verify_password("secret", "not-a-bcrypt-hash")
