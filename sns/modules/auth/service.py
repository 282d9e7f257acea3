"""认证模块 - 业务逻辑层"""

from datetime import timedelta

from loguru import logger

from sns.core.exceptions import InvalidCredentialsError
from sns.core.security import (
    Token,
    create_access_token,
    decode_access_token,
    verify_password,
)
from sns.modules.user.exceptions import UserNotFoundError
from sns.modules.user.repository import UserRepository


class AuthService:
    """登录与请求主体解析，签名密钥和有效期由调用方注入"""

    def __init__(
        self,
        user_repo: UserRepository,
        secret_key: str,
        token_ttl: timedelta,
    ) -> None:
        self.user_repo = user_repo
        self.secret_key = secret_key
        self.token_ttl = token_ttl

    async def login(self, username: str, password: str) -> Token:
        """校验用户凭证并签发 access token"""
        user = await self.user_repo.get_by_username(username)
        if not user:
            raise UserNotFoundError(username)
        if not verify_password(password, user.hashed_password):
            logger.info("Login rejected for {}: bad password", username)
            raise InvalidCredentialsError(username)

        access_token = create_access_token(
            subject=user.username,
            user_id=user.id,
            secret_key=self.secret_key,
            expires_delta=self.token_ttl,
        )
        return Token(access_token=access_token)

    async def resolve_principal(self, token: str) -> str:
        """
        校验 token 并确认其主体仍是有效用户，返回用户名

        按 uid 定位用户：注销后同名重新注册的是另一个账号，旧 token 不再生效。
        """
        claims = decode_access_token(token, self.secret_key)
        user = await self.user_repo.get_by_id(claims.user_id)
        if not user or user.username != claims.username:
            raise UserNotFoundError(claims.username)
        return user.username
