"""帖子模块 - Schema"""

from uuid import UUID

from pydantic import Field

from sns.modules.user.schemas import UserSummary
from sns.schemas.datetime_types import UTCDateTime
from sns.schemas.response import BaseSchema


class PostCreate(BaseSchema):
    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1)


class PostModify(PostCreate):
    pass


class PostResponse(BaseSchema):
    """帖子响应模型"""

    id: UUID
    title: str
    body: str
    user: UserSummary
    created_at: UTCDateTime
    updated_at: UTCDateTime
