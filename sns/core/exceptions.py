"""业务异常定义"""

from sns.core.error_codes import ErrorCode


class ApiError(Exception):
    """业务异常基类"""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        status_code: int = 400,
        detail: dict | None = None,
    ) -> None:
        self.code = code
        self.message = message or code.name.replace("_", " ").title()
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)


class NotFoundError(ApiError):
    """资源不存在"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
        message: str = "Resource not found",
        detail: dict | None = None,
    ) -> None:
        super().__init__(code, message, status_code=404, detail=detail)


class ConflictError(ApiError):
    """资源冲突"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.DUPLICATE_ENTRY,
        message: str = "Resource conflict",
        detail: dict | None = None,
    ) -> None:
        super().__init__(code, message, status_code=409, detail=detail)


class UnauthorizedError(ApiError):
    """认证失败"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        message: str = "Unauthorized",
        detail: dict | None = None,
    ) -> None:
        super().__init__(code, message, status_code=401, detail=detail)


class InvalidCredentialsError(UnauthorizedError):
    """凭证无效（密码错误）"""

    def __init__(self, username: str) -> None:
        super().__init__(
            ErrorCode.INVALID_CREDENTIALS,
            f"invalid password for {username}",
            detail={"username": username},
        )


class TokenInvalidError(UnauthorizedError):
    """token 签名错误或格式不正确"""

    def __init__(self, message: str = "Token is invalid") -> None:
        super().__init__(ErrorCode.TOKEN_INVALID, message)


class TokenExpiredError(UnauthorizedError):
    """token 已过期"""

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(ErrorCode.TOKEN_EXPIRED, message)


class ForbiddenError(ApiError):
    """权限不足"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.FORBIDDEN,
        message: str = "Forbidden",
        detail: dict | None = None,
    ) -> None:
        super().__init__(code, message, status_code=403, detail=detail)
