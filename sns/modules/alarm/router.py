"""通知模块 - 路由"""

from fastapi import APIRouter

from sns.dependencies import Pagination
from sns.modules.auth.dependencies import CurrentUsername
from sns.schemas.response import ApiPagedResponse

from .dependencies import AlarmServiceDep
from .schemas import AlarmResponse

router = APIRouter()


@router.get("", response_model=ApiPagedResponse[AlarmResponse])
async def list_alarms(
    username: CurrentUsername,
    service: AlarmServiceDep,
    paging: Pagination,
) -> ApiPagedResponse[AlarmResponse]:
    """当前用户的通知（最新在前）"""
    result = await service.list(username, page=paging.page, page_size=paging.page_size)
    return ApiPagedResponse.of(result, paging)
