"""安全工具：密码哈希 + JWT

依赖安装: uv add pyjwt "pwdlib[argon2]"
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pydantic import BaseModel

from sns.core.exceptions import TokenExpiredError, TokenInvalidError

ALGORITHM = "HS256"

# 使用推荐的 Argon2 算法（自带随机盐）
password_hash = PasswordHash.recommended()


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TokenConfigError(ValueError):
    """签名密钥或有效期配置无效"""


class TokenClaims(BaseModel):
    """access token 中携带的主体信息"""

    username: str
    user_id: UUID


def hash_password(password: str) -> str:
    """密码哈希"""
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码（无法识别的哈希视为不匹配）"""
    try:
        return password_hash.verify(plain_password, hashed_password)
    except UnknownHashError:
        return False


def create_access_token(
    subject: str,
    user_id: UUID,
    secret_key: str,
    expires_delta: timedelta,
) -> str:
    """签发 JWT access token，sub 为用户名，uid 为用户 ID"""
    if not secret_key:
        raise TokenConfigError("secret_key must not be empty")
    if expires_delta <= timedelta(0):
        raise TokenConfigError(f"token ttl must be positive, got {expires_delta}")

    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "uid": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> TokenClaims:
    """
    校验 JWT 并返回主体信息

    用户名注销后可被重新注册，因此调用方必须用 user_id 而不是用户名定位用户。

    Raises:
        TokenExpiredError: 已过期
        TokenInvalidError: 签名错误、格式错误或缺少 sub / uid
    """
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "sub", "uid"]},
        )
    except ExpiredSignatureError as e:
        raise TokenExpiredError() from e
    except InvalidTokenError as e:
        raise TokenInvalidError() from e

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise TokenInvalidError("Token has no subject")
    try:
        user_id = UUID(str(payload["uid"]))
    except ValueError as e:
        raise TokenInvalidError("Token has a malformed uid") from e
    return TokenClaims(username=subject, user_id=user_id)
