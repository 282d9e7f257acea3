"""用户模块 - 路由"""

from fastapi import APIRouter, status

from sns.modules.auth.dependencies import CurrentUsername
from sns.schemas.response import ApiResponse

from .dependencies import UserServiceDep
from .schemas import UserJoin, UserResponse

router = APIRouter()


@router.post(
    "/join", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED
)
async def join(user_in: UserJoin, service: UserServiceDep) -> ApiResponse[UserResponse]:
    """注册"""
    user = await service.join(
        user_in.username, user_in.password, user_in.email, user_in.nickname
    )
    return ApiResponse(data=user)


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(username: CurrentUsername, service: UserServiceDep) -> ApiResponse[UserResponse]:
    """获取当前用户"""
    user = await service.lookup(username)
    return ApiResponse(data=user)


@router.delete("/me", response_model=ApiResponse[None])
async def withdraw(username: CurrentUsername, service: UserServiceDep) -> ApiResponse[None]:
    """注销当前用户"""
    await service.delete(username)
    return ApiResponse(data=None, message="User deleted")
