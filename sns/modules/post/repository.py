"""帖子模块 - 数据访问层"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sns.core.database import filter_active

from .models import Post


class PostRepository:
    """
    帖子数据访问层

    注意：
    - 事务由 get_db() 依赖自动管理，Repository 只用 flush/refresh
    - 查询一律排除已软删除的记录
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, post_id: UUID) -> Post | None:
        stmt = filter_active(select(Post).where(Post.id == post_id))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_update(self, post_id: UUID) -> Post | None:
        """加行锁读取，保证归属校验与写入之间不被并发修改穿插"""
        stmt = filter_active(
            select(Post).where(Post.id == post_id).with_for_update(of=Post)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_list(
        self,
        page: int = 0,
        page_size: int = 20,
        *,
        user_id: UUID | None = None,
    ) -> tuple[list[Post], int]:
        """分页查询（page 从 0 开始，最新在前），可按作者过滤"""
        base = filter_active(select(Post))
        if user_id is not None:
            base = base.where(Post.user_id == user_id)

        count_stmt = select(func.count()).select_from(base.subquery())
        total = await self.db.scalar(count_stmt) or 0

        stmt = (
            base.order_by(Post.created_at.desc(), Post.id.desc())
            .offset(page * page_size)
            .limit(page_size)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, post: Post) -> Post:
        self.db.add(post)
        await self.db.flush()
        await self.db.refresh(post)
        return post

    async def update(self, post: Post) -> Post:
        await self.db.flush()
        await self.db.refresh(post)
        return post

    async def soft_delete(self, post: Post) -> None:
        post.soft_delete()
        await self.db.flush()
