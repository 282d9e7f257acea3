"""用户模块 - 业务逻辑层"""

from loguru import logger
from sqlalchemy.exc import IntegrityError

from sns.core.security import hash_password

from .exceptions import UserNotFoundError, UsernameAlreadyExistsError
from .models import User
from .repository import UserRepository
from .schemas import UserResponse


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_entity(self, username: str) -> User:
        """按用户名获取 ORM 实体，供其他模块做存在性 / 归属校验"""
        user = await self.repository.get_by_username(username)
        if not user:
            raise UserNotFoundError(username)
        return user

    async def lookup(self, username: str) -> UserResponse:
        """获取单个用户"""
        user = await self.get_entity(username)
        return UserResponse.model_validate(user)

    async def join(
        self,
        username: str,
        password: str,
        email: str,
        nickname: str,
    ) -> UserResponse:
        """注册"""
        if await self.repository.get_by_username(username):
            raise UsernameAlreadyExistsError(username)

        user = User(
            username=username,
            hashed_password=hash_password(password),
            email=email,
            nickname=nickname,
        )
        try:
            user = await self.repository.create(user)
        except IntegrityError as e:
            # 并发注册：预检查之后被其他请求抢先写入
            raise UsernameAlreadyExistsError(username) from e

        logger.info("User joined: {}", username)
        return UserResponse.model_validate(user)

    async def delete(self, username: str) -> None:
        """注销（软删除），用户名随后可被重新注册"""
        user = await self.get_entity(username)
        await self.repository.soft_delete(user)
        logger.info("User withdrawn: {}", username)
