"""帖子模块 - 路由"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from sns.dependencies import Pagination
from sns.modules.auth.dependencies import CurrentUsername, get_current_username
from sns.schemas.response import ApiPagedResponse, ApiResponse

from .dependencies import PostServiceDep
from .schemas import PostCreate, PostModify, PostResponse

router = APIRouter()


@router.post(
    "", response_model=ApiResponse[PostResponse], status_code=status.HTTP_201_CREATED
)
async def create_post(
    post_in: PostCreate,
    username: CurrentUsername,
    service: PostServiceDep,
) -> ApiResponse[PostResponse]:
    """发帖"""
    post = await service.create(post_in.title, post_in.body, username)
    return ApiResponse(data=post)


@router.get(
    "",
    response_model=ApiPagedResponse[PostResponse],
    dependencies=[Depends(get_current_username)],
)
async def list_posts(
    service: PostServiceDep,
    paging: Pagination,
) -> ApiPagedResponse[PostResponse]:
    """帖子列表（最新在前）"""
    result = await service.list(page=paging.page, page_size=paging.page_size)
    return ApiPagedResponse.of(result, paging)


@router.get("/my", response_model=ApiPagedResponse[PostResponse])
async def my_posts(
    username: CurrentUsername,
    service: PostServiceDep,
    paging: Pagination,
) -> ApiPagedResponse[PostResponse]:
    """我的帖子"""
    result = await service.my(username, page=paging.page, page_size=paging.page_size)
    return ApiPagedResponse.of(result, paging)


@router.put("/{post_id}", response_model=ApiResponse[PostResponse])
async def modify_post(
    post_id: UUID,
    post_in: PostModify,
    username: CurrentUsername,
    service: PostServiceDep,
) -> ApiResponse[PostResponse]:
    """修改帖子（仅作者）"""
    post = await service.modify(post_in.title, post_in.body, username, post_id)
    return ApiResponse(data=post)


@router.delete("/{post_id}", response_model=ApiResponse[None])
async def delete_post(
    post_id: UUID,
    username: CurrentUsername,
    service: PostServiceDep,
) -> ApiResponse[None]:
    """删除帖子（仅作者）"""
    await service.delete(username, post_id)
    return ApiResponse(data=None, message="Post deleted")
