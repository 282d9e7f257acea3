"""全局共享依赖"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from sns.core.database import get_db
from sns.schemas.response import PageParams

# 数据库会话依赖（自动管理事务）
DBSession = Annotated[AsyncSession, Depends(get_db)]


def get_page_params(
    page: Annotated[int, Query(ge=0, description="页码（从 0 开始）")] = 0,
    page_size: Annotated[int, Query(ge=1, le=100, description="每页条数")] = 20,
) -> PageParams:
    return PageParams(page=page, page_size=page_size)


Pagination = Annotated[PageParams, Depends(get_page_params)]
