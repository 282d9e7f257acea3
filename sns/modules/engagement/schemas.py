"""互动模块 - Schema"""

from uuid import UUID

from pydantic import Field

from sns.modules.user.schemas import UserSummary
from sns.schemas.datetime_types import UTCDateTime
from sns.schemas.response import BaseSchema


class CommentCreate(BaseSchema):
    comment: str = Field(min_length=1, max_length=1000)


class CommentResponse(BaseSchema):
    """评论响应模型"""

    id: UUID
    comment: str
    post_id: UUID
    user: UserSummary
    created_at: UTCDateTime
    updated_at: UTCDateTime


class LikeCountResponse(BaseSchema):
    post_id: UUID
    count: int
