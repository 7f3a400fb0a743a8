"""Password Hashing — passlib bcrypt round trip and malformed hashes."""

from wms.infrastructure.security import (
    hash_password, new_session_token, verify_password,
)


def test_hash_verifies_and_differs_from_plaintext():
    hashed = hash_password("password")
    assert hashed != "password"
    assert verify_password("password", hashed)
    assert not verify_password("Password", hashed)


def test_malformed_hash_is_a_mismatch_not_an_error():
    assert verify_password("password", "not-a-hash") is False


def test_session_tokens_are_unique():
    assert new_session_token() != new_session_token()
