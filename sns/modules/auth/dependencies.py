"""认证模块 - 依赖注入"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from sns.config import Settings, get_settings
from sns.core.exceptions import UnauthorizedError
from sns.modules.user.dependencies import get_user_repository
from sns.modules.user.repository import UserRepository

from .service import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


def get_auth_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(
        user_repo,
        secret_key=settings.secret_key.get_secret_value(),
        token_ttl=settings.access_token_ttl,
    )


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_username(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    auth_service: AuthServiceDep,
) -> str:
    """解析当前请求的主体（用户名）"""
    if not token:
        raise UnauthorizedError(message="Authentication required")
    return await auth_service.resolve_principal(token)


CurrentUsername = Annotated[str, Depends(get_current_username)]
