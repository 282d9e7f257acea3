"""互动模块 - 业务逻辑层（点赞 / 评论）"""

from uuid import UUID

from loguru import logger
from sqlalchemy.exc import IntegrityError

from sns.modules.alarm.models import AlarmType
from sns.modules.alarm.service import AlarmService
from sns.modules.post.service import PostService
from sns.modules.user.service import UserService

from .exceptions import AlreadyLikedError
from .models import Comment, Like
from .repository import CommentRepository, LikeRepository
from .schemas import CommentResponse


class EngagementService:
    """
    点赞与评论

    注意：
    - 事务由 get_db() 依赖自动管理，Service 层不调用 commit
    - 点赞前的查询只是快速失败，(user_id, post_id) 唯一约束才是最终判定
    - 成功的点赞 / 评论会在同一事务内给帖子作者写入通知
    """

    def __init__(
        self,
        like_repo: LikeRepository,
        comment_repo: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        alarm_service: AlarmService,
    ) -> None:
        self.like_repo = like_repo
        self.comment_repo = comment_repo
        self.post_service = post_service
        self.user_service = user_service
        self.alarm_service = alarm_service

    async def like(self, post_id: UUID, username: str) -> None:
        post = await self.post_service.get_entity(post_id)
        user = await self.user_service.get_entity(username)

        if await self.like_repo.get_by_user_and_post(user.id, post.id):
            raise AlreadyLikedError(username, post_id)

        try:
            await self.like_repo.create(Like(user_id=user.id, post_id=post.id))
        except IntegrityError as e:
            # 并发点赞：唯一约束拒绝了第二次写入
            raise AlreadyLikedError(username, post_id) from e

        await self.alarm_service.record(
            recipient_id=post.user_id,
            alarm_type=AlarmType.NEW_LIKE_ON_POST,
            from_user_id=user.id,
            target_id=post.id,
        )
        logger.debug("{} liked post {}", username, post_id)

    async def like_count(self, post_id: UUID) -> int:
        post = await self.post_service.get_entity(post_id)
        return await self.like_repo.count_by_post(post.id)

    async def comment(self, post_id: UUID, username: str, comment: str) -> CommentResponse:
        post = await self.post_service.get_entity(post_id)
        user = await self.user_service.get_entity(username)

        saved = await self.comment_repo.create(
            Comment(user=user, post_id=post.id, comment=comment)
        )
        await self.alarm_service.record(
            recipient_id=post.user_id,
            alarm_type=AlarmType.NEW_COMMENT_ON_POST,
            from_user_id=user.id,
            target_id=post.id,
        )
        return CommentResponse.model_validate(saved)

    async def list_comments(
        self, post_id: UUID, page: int = 0, page_size: int = 20
    ) -> tuple[list[CommentResponse], int]:
        post = await self.post_service.get_entity(post_id)
        comments, total = await self.comment_repo.get_list_by_post(
            post.id, page=page, page_size=page_size
        )
        return [CommentResponse.model_validate(c) for c in comments], total
