"""互动模块 - 数据访问层"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sns.core.database import filter_active

from .models import Comment, Like


class LikeRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_user_and_post(self, user_id: UUID, post_id: UUID) -> Like | None:
        stmt = filter_active(
            select(Like).where(Like.user_id == user_id, Like.post_id == post_id)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_post(self, post_id: UUID) -> int:
        stmt = filter_active(select(Like).where(Like.post_id == post_id))
        return await self.db.scalar(select(func.count()).select_from(stmt.subquery())) or 0

    async def create(self, like: Like) -> Like:
        """写入点赞（违反唯一约束时抛出 IntegrityError）"""
        self.db.add(like)
        await self.db.flush()
        return like


class CommentRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_list_by_post(
        self, post_id: UUID, page: int = 0, page_size: int = 20
    ) -> tuple[list[Comment], int]:
        """帖子的评论，按创建顺序"""
        base = filter_active(select(Comment).where(Comment.post_id == post_id))
        total = await self.db.scalar(select(func.count()).select_from(base.subquery())) or 0

        stmt = (
            base.order_by(Comment.created_at.asc(), Comment.id.asc())
            .offset(page * page_size)
            .limit(page_size)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, comment: Comment) -> Comment:
        self.db.add(comment)
        await self.db.flush()
        await self.db.refresh(comment)
        return comment
