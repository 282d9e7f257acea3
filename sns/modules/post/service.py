"""帖子模块 - 业务逻辑层"""

from uuid import UUID

from loguru import logger

from sns.modules.user.service import UserService

from .exceptions import PermissionDeniedError, PostNotFoundError
from .models import Post
from .repository import PostRepository
from .schemas import PostResponse


class PostService:
    """
    帖子业务逻辑层

    注意：
    - 事务由 get_db() 依赖自动管理，Service 层不调用 commit
    - 归属校验比较 user_id，而不是 ORM 对象本身
    - 管理员角色不跳过归属校验
    """

    def __init__(self, repository: PostRepository, user_service: UserService) -> None:
        self.repository = repository
        self.user_service = user_service

    async def get_entity(self, post_id: UUID) -> Post:
        """获取帖子实体，供互动模块做存在性校验"""
        post = await self.repository.get_by_id(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def _get_owned_for_update(self, username: str, post_id: UUID) -> Post:
        """先锁定帖子（不存在时对任何调用者都是 PostNotFound），再校验归属"""
        post = await self.repository.get_for_update(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        user = await self.user_service.get_entity(username)
        if post.user_id != user.id:
            raise PermissionDeniedError(username, post_id)
        return post

    async def create(self, title: str, body: str, username: str) -> PostResponse:
        user = await self.user_service.get_entity(username)
        post = await self.repository.create(Post(title=title, body=body, user=user))
        logger.info("Post {} created by {}", post.id, username)
        return PostResponse.model_validate(post)

    async def modify(
        self, title: str, body: str, username: str, post_id: UUID
    ) -> PostResponse:
        post = await self._get_owned_for_update(username, post_id)
        post.title = title
        post.body = body
        post = await self.repository.update(post)
        return PostResponse.model_validate(post)

    async def delete(self, username: str, post_id: UUID) -> None:
        post = await self._get_owned_for_update(username, post_id)
        await self.repository.soft_delete(post)
        logger.info("Post {} deleted by {}", post_id, username)

    async def my(
        self, username: str, page: int = 0, page_size: int = 20
    ) -> tuple[list[PostResponse], int]:
        """某个用户的帖子"""
        user = await self.user_service.get_entity(username)
        posts, total = await self.repository.get_list(
            page=page, page_size=page_size, user_id=user.id
        )
        return [PostResponse.model_validate(p) for p in posts], total

    async def list(
        self, page: int = 0, page_size: int = 20
    ) -> tuple[list[PostResponse], int]:
        """全部帖子，最新在前"""
        posts, total = await self.repository.get_list(page=page, page_size=page_size)
        return [PostResponse.model_validate(p) for p in posts], total
