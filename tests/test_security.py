"""Tests for password hashing."""

import pytest

from water_tracker_api.app.core.errors import HashingError
from water_tracker_api.app.core.security import BCRYPT_ROUNDS, hash_password, verify_password


def test_hash_is_not_plaintext_and_verifies():
    hashed = hash_password("pw1")
    assert hashed != "pw1"
    assert verify_password("pw1", hashed)


def test_wrong_password_does_not_verify():
    assert not verify_password("pw2", hash_password("pw1"))


def test_hashes_are_salted():
    first = hash_password("same")
    second = hash_password("same")
    assert first != second
    assert verify_password("same", first)
    assert verify_password("same", second)


def test_cost_factor_is_embedded_in_hash():
    # bcrypt format: $2b$<cost>$<salt+hash>
    assert hash_password("pw").split("$")[2] == f"{BCRYPT_ROUNDS:02d}"


def test_non_ascii_password():
    hashed = hash_password("água-fresca")
    assert verify_password("água-fresca", hashed)


def test_malformed_hash_is_a_mismatch():
    assert verify_password("pw", "not-a-bcrypt-hash") is False


def test_unhashable_input_raises_hashing_error():
    with pytest.raises(HashingError):
        hash_password(None)


def test_password_over_72_bytes_is_rejected():
    with pytest.raises(HashingError):
        hash_password("x" * 73)
