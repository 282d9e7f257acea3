"""认证模块 - 路由"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from sns.core.security import Token
from sns.modules.user.schemas import UserLogin
from sns.schemas.response import ApiResponse

from .dependencies import AuthServiceDep

router = APIRouter()


@router.post("/login", response_model=ApiResponse[Token])
async def login(user_in: UserLogin, auth_service: AuthServiceDep) -> ApiResponse[Token]:
    """登录并获取 access token"""
    token = await auth_service.login(user_in.username, user_in.password)
    return ApiResponse(data=token)


@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    auth_service: AuthServiceDep,
) -> Token:
    """OAuth2 password flow（供 Swagger UI 授权使用）"""
    return await auth_service.login(form_data.username, form_data.password)
