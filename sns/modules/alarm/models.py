"""通知模块 - ORM 模型"""

from enum import Enum
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from sns.core.database import Base


class AlarmType(str, Enum):
    NEW_COMMENT_ON_POST = "NEW_COMMENT_ON_POST"
    NEW_LIKE_ON_POST = "NEW_LIKE_ON_POST"

    @property
    def text(self) -> str:
        return _ALARM_TEXT[self]


_ALARM_TEXT = {
    AlarmType.NEW_COMMENT_ON_POST: "new comment!",
    AlarmType.NEW_LIKE_ON_POST: "new like!",
}


class Alarm(Base):
    """
    通知（创建后不可变）

    - user_id: 接收者
    - from_user_id: 触发通知的用户
    - target_id: 被互动的对象（帖子）
    """

    __tablename__ = "alarm"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("app_user.id"))
    alarm_type: Mapped[AlarmType] = mapped_column(String(30))
    from_user_id: Mapped[UUID]
    target_id: Mapped[UUID]

    __table_args__ = (Index("ix_alarm_user_created", "user_id", "created_at"),)
