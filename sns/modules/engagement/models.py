"""互动模块 - ORM 模型"""

from uuid import UUID

from sqlalchemy import ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sns.core.database import Base
from sns.modules.user.models import User


class Like(Base):
    """点赞，(user_id, post_id) 唯一"""

    __tablename__ = "post_like"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("app_user.id"))
    post_id: Mapped[UUID] = mapped_column(ForeignKey("post.id"), index=True)

    __table_args__ = (
        # 重复点赞的最终防线（并发下应用层预检查不可靠）
        UniqueConstraint("user_id", "post_id", name="uq_post_like_user_post"),
    )


class Comment(Base):
    """评论"""

    __tablename__ = "post_comment"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("app_user.id"))
    post_id: Mapped[UUID] = mapped_column(ForeignKey("post.id"), index=True)
    comment: Mapped[str] = mapped_column(Text)

    user: Mapped[User] = relationship(lazy="joined", innerjoin=True)
