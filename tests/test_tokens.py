from datetime import timedelta

import pytest
from jose import jwt

from chirpy.core.errors import AuthError
from chirpy.core.tokens import create_access_token, decode_access, make_refresh_token


def test_access_token_round_trip():
    token = create_access_token(7, "s3cret")
    assert decode_access(token, "s3cret") == 7


def test_access_token_claims():
    token = create_access_token(3, "s3cret")
    claims = jwt.get_unverified_claims(token)
    assert claims["iss"] == "chirpy"
    assert claims["sub"] == "3"
    assert claims["exp"] - claims["iat"] == 3600
    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_wrong_secret_rejected():
    token = create_access_token(1, "one")
    with pytest.raises(AuthError):
        decode_access(token, "two")


def test_expired_token_rejected():
    token = create_access_token(1, "s3cret", expires_delta=timedelta(seconds=-10))
    with pytest.raises(AuthError):
        decode_access(token, "s3cret")


def test_malformed_token_rejected():
    with pytest.raises(AuthError):
        decode_access("not-a-jwt", "s3cret")


def test_non_numeric_subject_rejected():
    token = jwt.encode({"iss": "chirpy", "sub": "abc", "exp": 9999999999}, "s3cret", algorithm="HS256")
    with pytest.raises(AuthError):
        decode_access(token, "s3cret")


def test_other_algorithm_rejected():
    token = jwt.encode({"iss": "chirpy", "sub": "1", "exp": 9999999999}, "s3cret", algorithm="HS512")
    with pytest.raises(AuthError):
        decode_access(token, "s3cret")


def test_refresh_token_shape():
    a, b = make_refresh_token(), make_refresh_token()
    assert len(a) == 64
    assert a == a.lower()
    int(a, 16)
    assert a != b


def test_unicode_digit_subject_rejected():
    token = jwt.encode({"iss": "chirpy", "sub": "¹", "exp": 9999999999}, "s3cret", algorithm="HS256")
    with pytest.raises(AuthError):
        decode_access(token, "s3cret")
