"""用户模块 - Schema"""

from typing import Annotated
from uuid import UUID

from pydantic import EmailStr, Field, StringConstraints

from sns.schemas.datetime_types import UTCDateTime
from sns.schemas.response import BaseSchema

from .models import UserRole

# 密码原样保留（不受 BaseSchema 的 str_strip_whitespace 影响），与 OAuth2 表单登录一致
JoinPassword = Annotated[str, StringConstraints(strip_whitespace=False, min_length=8)]
LoginPassword = Annotated[str, StringConstraints(strip_whitespace=False, min_length=1)]


class UserJoin(BaseSchema):
    username: str = Field(min_length=3, max_length=50)
    password: JoinPassword
    email: EmailStr
    nickname: str = Field(min_length=1, max_length=50)


class UserLogin(BaseSchema):
    username: str = Field(min_length=1, max_length=50)
    password: LoginPassword


class UserResponse(BaseSchema):
    """用户响应模型（不含密码哈希）"""

    id: UUID
    username: str
    email: str
    nickname: str
    role: UserRole
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserSummary(BaseSchema):
    """嵌入帖子 / 评论中的作者信息"""

    id: UUID
    username: str
    nickname: str
