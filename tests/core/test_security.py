"""密码哈希与 JWT 签发 / 校验"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from uuid_utils.compat import uuid7

from sns.core.error_codes import ErrorCode
from sns.core.exceptions import TokenExpiredError, TokenInvalidError
from sns.core.security import (
    TokenConfigError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-key-with-enough-length"
USER_ID = uuid7()


def test_hash_is_salted_and_verifiable():
    first = hash_password("pw1")
    second = hash_password("pw1")

    assert first != second
    assert "pw1" not in first
    assert verify_password("pw1", first)
    assert verify_password("pw1", second)


def test_verify_rejects_wrong_password():
    digest = hash_password("pw1")
    assert not verify_password("wrong", digest)


def test_verify_rejects_unrecognised_digest():
    assert not verify_password("pw1", "not-a-real-hash")


def test_token_round_trip_returns_claims():
    token = create_access_token("alice", USER_ID, SECRET, timedelta(minutes=5))
    claims = decode_access_token(token, SECRET)
    assert claims.username == "alice"
    assert claims.user_id == USER_ID


def test_token_embeds_absolute_expiry():
    before = datetime.now(timezone.utc)
    token = create_access_token("alice", USER_ID, SECRET, timedelta(minutes=5))
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    assert before + timedelta(minutes=4) < exp <= before + timedelta(minutes=5, seconds=1)


def test_token_signed_with_other_secret_is_invalid():
    token = create_access_token("alice", USER_ID, SECRET, timedelta(minutes=5))
    with pytest.raises(TokenInvalidError) as exc_info:
        decode_access_token(token, "some-other-secret-key-of-enough-length")
    assert exc_info.value.code == ErrorCode.TOKEN_INVALID
    assert exc_info.value.status_code == 401


def test_tampered_token_is_invalid():
    token = create_access_token("alice", USER_ID, SECRET, timedelta(minutes=5))
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(TokenInvalidError):
        decode_access_token(tampered, SECRET)


def test_garbage_token_is_invalid():
    with pytest.raises(TokenInvalidError):
        decode_access_token("not.a.token", SECRET)


def test_expired_token_is_reported_as_expired():
    past = datetime.now(timezone.utc) - timedelta(minutes=1)
    payload = {"sub": "alice", "uid": str(USER_ID), "exp": past}
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(TokenExpiredError) as exc_info:
        decode_access_token(token, SECRET)
    assert exc_info.value.code == ErrorCode.TOKEN_EXPIRED


def test_token_without_subject_is_invalid():
    future = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"uid": str(USER_ID), "exp": future}, SECRET, algorithm="HS256")
    with pytest.raises(TokenInvalidError):
        decode_access_token(token, SECRET)


@pytest.mark.parametrize(
    "extra",
    [{}, {"uid": "not-a-uuid"}],
    ids=["missing-uid", "malformed-uid"],
)
def test_token_without_valid_user_id_is_invalid(extra):
    future = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"sub": "alice", "exp": future, **extra}, SECRET, algorithm="HS256")
    with pytest.raises(TokenInvalidError):
        decode_access_token(token, SECRET)


@pytest.mark.parametrize("ttl", [timedelta(0), timedelta(seconds=-1)])
def test_non_positive_ttl_is_rejected(ttl):
    with pytest.raises(TokenConfigError):
        create_access_token("alice", USER_ID, SECRET, ttl)


def test_empty_secret_is_rejected():
    with pytest.raises(TokenConfigError):
        create_access_token("alice", USER_ID, "", timedelta(minutes=5))
