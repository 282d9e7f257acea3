"""用户模块 - 异常"""

from sns.core.error_codes import ErrorCode
from sns.core.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """用户不存在"""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message=f"{username} not found",
            detail={"username": username},
        )


class UsernameAlreadyExistsError(ConflictError):
    """用户名已存在"""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            message=f"{username} is duplicated",
            detail={"username": username},
        )
