"""帖子模块 - ORM 模型"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sns.core.database import Base
from sns.modules.user.models import User


class Post(Base):
    """帖子，只能由作者本人修改 / 删除"""

    __tablename__ = "post"

    title: Mapped[str] = mapped_column(String(200))
    body: Mapped[str] = mapped_column(Text)
    user_id: Mapped[UUID] = mapped_column(ForeignKey("app_user.id"), index=True)

    # 多对一，异步场景下随查询一并加载
    user: Mapped[User] = relationship(lazy="joined", innerjoin=True)
