"""
Simple SNS - 应用入口

- create_app 工厂模式，便于测试和多实例
- setup_xxx 函数分离注册逻辑
- 三层架构：Router → Service → Repository
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sns import __version__
from sns.config import get_settings
from sns.core.database import close_database, init_database
from sns.core.exception_handlers import setup_exception_handlers
from sns.core.logging import setup_logging
from sns.core.middlewares import setup_middlewares
from sns.core.routers import setup_routers
from sns.schemas.response import ApiResponse


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # 启动时初始化
    await init_database()
    yield
    # 关闭时清理
    await close_database()


def create_app() -> FastAPI:
    """应用工厂函数"""
    settings = get_settings()

    setup_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    )

    application = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # 注册组件（顺序重要）
    setup_middlewares(application)
    setup_routers(application)
    setup_exception_handlers(application)

    @application.get("/health", response_model=ApiResponse[dict[str, str]])
    async def health_check() -> ApiResponse[dict[str, str]]:
        return ApiResponse(data={"status": "ok"})

    return application


app = create_app()
