"""用户模块 - ORM 模型"""

from enum import Enum

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from sns.core.database import Base


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    """
    用户模型

    继承自 Base，自动获得：
    - id: UUIDv7 主键
    - created_at, updated_at: 时间戳
    - deleted_at: 软删除
    """

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(50))
    hashed_password: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255))
    nickname: Mapped[str] = mapped_column(String(50))
    role: Mapped[UserRole] = mapped_column(String(10), default=UserRole.USER)

    __table_args__ = (
        # 部分唯一索引：只对未删除的记录强制唯一（注销后用户名可复用）
        Index(
            "uq_app_user_username_active",
            "username",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )
