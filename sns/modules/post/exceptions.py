"""帖子模块 - 异常"""

from uuid import UUID

from sns.core.error_codes import ErrorCode
from sns.core.exceptions import ForbiddenError, NotFoundError


class PostNotFoundError(NotFoundError):
    """帖子不存在（或已删除）"""

    def __init__(self, post_id: UUID) -> None:
        super().__init__(
            code=ErrorCode.POST_NOT_FOUND,
            message=f"{post_id} not found",
            detail={"post_id": str(post_id)},
        )


class PermissionDeniedError(ForbiddenError):
    """非作者本人操作帖子"""

    def __init__(self, username: str, post_id: UUID) -> None:
        super().__init__(
            code=ErrorCode.PERMISSION_DENIED,
            message=f"{username} has no permission with {post_id}",
            detail={"username": username, "post_id": str(post_id)},
        )
