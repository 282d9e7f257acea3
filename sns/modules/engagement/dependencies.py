"""互动模块 - 依赖注入"""

from typing import Annotated

from fastapi import Depends

from sns.dependencies import DBSession
from sns.modules.alarm.dependencies import get_alarm_service
from sns.modules.alarm.service import AlarmService
from sns.modules.post.dependencies import get_post_service
from sns.modules.post.service import PostService
from sns.modules.user.dependencies import get_user_service
from sns.modules.user.service import UserService

from .repository import CommentRepository, LikeRepository
from .service import EngagementService


def get_engagement_service(
    db: DBSession,
    post_service: Annotated[PostService, Depends(get_post_service)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    alarm_service: Annotated[AlarmService, Depends(get_alarm_service)],
) -> EngagementService:
    return EngagementService(
        LikeRepository(db),
        CommentRepository(db),
        post_service,
        user_service,
        alarm_service,
    )


EngagementServiceDep = Annotated[EngagementService, Depends(get_engagement_service)]
