from datetime import timedelta

from app.core.security import (
    create_access_token,
    get_password_hash,
    verify_access_token,
    verify_password,
)


def test_password_hash_round_trip():
    hashed = get_password_hash("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_token_carries_user_id():
    token = create_access_token({"sub": "42", "user_id": 42})
    assert verify_access_token(token).user_id == 42


def test_token_without_expiry_by_default():
    from jose import jwt
    token = create_access_token({"sub": "7", "user_id": 7})
    assert "exp" not in jwt.get_unverified_claims(token)


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "1", "user_id": 1}, expires_delta=timedelta(seconds=-5))
    assert verify_access_token(token) is None


def test_tampered_token_is_rejected():
    token = create_access_token({"sub": "1", "user_id": 1})
    assert verify_access_token(token + "x") is None


def test_token_without_user_id_is_rejected():
    token = create_access_token({"sub": "1"})
    assert verify_access_token(token) is None
