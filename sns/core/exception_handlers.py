"""全局异常处理器注册"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from sns.core.error_codes import ErrorCode
from sns.core.exceptions import ApiError
from sns.schemas.response import ErrorResponse


def error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    detail: dict | None = None,
) -> JSONResponse:
    """按 ErrorResponse 结构输出错误，401 附带 Bearer 认证质询"""
    body = ErrorResponse(code=code, message=message, detail=detail)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """业务异常处理"""
    logger.warning(
        "Business error: {} | code={} path={}",
        exc.message,
        exc.code.name,
        request.url.path,
    )
    return error_response(exc.status_code, exc.code, exc.message, exc.detail)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """请求验证异常处理"""
    errors = []
    for error in exc.errors():
        loc = error["loc"]
        field = ".".join(str(x) for x in loc[1:]) if len(loc) > 1 else str(loc[0])
        errors.append(
            {
                "field": field,
                "message": error["msg"],
                "type": error["type"],
            }
        )

    return error_response(
        422, ErrorCode.INVALID_PARAMETER, "Validation failed", {"errors": errors}
    )


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """HTTP 异常处理"""
    code_map = {
        400: ErrorCode.INVALID_REQUEST,
        401: ErrorCode.UNAUTHORIZED,
        403: ErrorCode.FORBIDDEN,
        404: ErrorCode.RESOURCE_NOT_FOUND,
        405: ErrorCode.INVALID_REQUEST,
        500: ErrorCode.SYSTEM_ERROR,
        503: ErrorCode.SERVICE_UNAVAILABLE,
    }
    code = code_map.get(exc.status_code, ErrorCode.SYSTEM_ERROR)

    response = error_response(exc.status_code, code, str(exc.detail))
    response.headers.update(exc.headers or {})
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """未捕获异常处理"""
    logger.opt(exception=exc).error(
        "Unhandled exception {method} {path}",
        method=request.method,
        path=request.url.path,
    )
    return error_response(500, ErrorCode.SYSTEM_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
