"""路由配置"""

from fastapi import FastAPI

from sns.api.v1.router import api_router
from sns.schemas import ErrorResponse

# 业务错误统一使用 ErrorResponse 结构（见 exception_handlers.py）
ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse}
    for status_code in (401, 403, 404, 409, 422)
}


def setup_routers(app: FastAPI) -> None:
    """注册路由"""
    app.include_router(api_router, prefix="/api/v1", responses=ERROR_RESPONSES)
