"""业务错误码

约定：
- 0: 成功
- 1xxxx: 通用错误
- 2xxxx: 认证 / 授权
- 3xxxx: 用户模块
- 4xxxx: 帖子 / 互动模块
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    SUCCESS = 0

    # 通用
    SYSTEM_ERROR = 10000
    SERVICE_UNAVAILABLE = 10001
    INVALID_REQUEST = 10002
    INVALID_PARAMETER = 10003
    RESOURCE_NOT_FOUND = 10004
    DUPLICATE_ENTRY = 10005

    # 认证 / 授权
    UNAUTHORIZED = 20000
    INVALID_CREDENTIALS = 20001
    TOKEN_INVALID = 20002
    TOKEN_EXPIRED = 20003
    FORBIDDEN = 20004
    PERMISSION_DENIED = 20005

    # 用户
    USER_NOT_FOUND = 30000
    USERNAME_ALREADY_EXISTS = 30001

    # 帖子 / 互动
    POST_NOT_FOUND = 40000
    ALREADY_LIKED = 40001
