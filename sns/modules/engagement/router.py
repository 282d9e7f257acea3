"""互动模块 - 路由（挂载在 /posts 下）"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from sns.dependencies import Pagination
from sns.modules.auth.dependencies import CurrentUsername, get_current_username
from sns.schemas.response import ApiPagedResponse, ApiResponse

from .dependencies import EngagementServiceDep
from .schemas import CommentCreate, CommentResponse, LikeCountResponse

router = APIRouter()


@router.post(
    "/{post_id}/likes",
    response_model=ApiResponse[None],
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: UUID,
    username: CurrentUsername,
    service: EngagementServiceDep,
) -> ApiResponse[None]:
    """点赞（每人每帖一次）"""
    await service.like(post_id, username)
    return ApiResponse(data=None, message="Liked")


@router.get(
    "/{post_id}/likes",
    response_model=ApiResponse[LikeCountResponse],
    dependencies=[Depends(get_current_username)],
)
async def like_count(
    post_id: UUID,
    service: EngagementServiceDep,
) -> ApiResponse[LikeCountResponse]:
    """点赞数"""
    count = await service.like_count(post_id)
    return ApiResponse(data=LikeCountResponse(post_id=post_id, count=count))


@router.post(
    "/{post_id}/comments",
    response_model=ApiResponse[CommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def comment_post(
    post_id: UUID,
    comment_in: CommentCreate,
    username: CurrentUsername,
    service: EngagementServiceDep,
) -> ApiResponse[CommentResponse]:
    """评论"""
    comment = await service.comment(post_id, username, comment_in.comment)
    return ApiResponse(data=comment)


@router.get(
    "/{post_id}/comments",
    response_model=ApiPagedResponse[CommentResponse],
    dependencies=[Depends(get_current_username)],
)
async def list_comments(
    post_id: UUID,
    service: EngagementServiceDep,
    paging: Pagination,
) -> ApiPagedResponse[CommentResponse]:
    """评论列表（按时间正序）"""
    result = await service.list_comments(
        post_id, page=paging.page, page_size=paging.page_size
    )
    return ApiPagedResponse.of(result, paging)
