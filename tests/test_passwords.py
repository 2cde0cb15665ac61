"""Tests for password hashing."""

from ohsnap.services.passwords import MIN_ROUNDS, hash_password, verify_password


def test_hash_and_verify() -> None:
    password_hash = hash_password("f/8 and be there")

    assert password_hash != "f/8 and be there"
    assert verify_password("f/8 and be there", password_hash)
    assert not verify_password("f/11 and be there", password_hash)


def test_cost_factor_never_below_minimum() -> None:
    password_hash = hash_password("secret", rounds=4)

    assert password_hash.startswith(f"$2b${MIN_ROUNDS}$")


def test_long_passwords_are_not_truncated() -> None:
    prefix = "x" * 80
    password_hash = hash_password(prefix + "a")

    assert not verify_password(prefix + "b", password_hash)


def test_verify_rejects_malformed_hash() -> None:
    assert not verify_password("secret", "not-a-bcrypt-hash")
