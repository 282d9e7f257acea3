"""互动模块 - 异常"""

from uuid import UUID

from sns.core.error_codes import ErrorCode
from sns.core.exceptions import ConflictError


class AlreadyLikedError(ConflictError):
    """同一用户重复点赞"""

    def __init__(self, username: str, post_id: UUID) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_LIKED,
            message=f"username {username} already like post {post_id}",
            detail={"username": username, "post_id": str(post_id)},
        )
