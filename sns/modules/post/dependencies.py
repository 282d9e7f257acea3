"""帖子模块 - 依赖注入"""

from typing import Annotated

from fastapi import Depends

from sns.dependencies import DBSession
from sns.modules.user.dependencies import get_user_service
from sns.modules.user.service import UserService

from .repository import PostRepository
from .service import PostService


def get_post_repository(db: DBSession) -> PostRepository:
    return PostRepository(db)


def get_post_service(
    repository: Annotated[PostRepository, Depends(get_post_repository)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> PostService:
    return PostService(repository, user_service)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
