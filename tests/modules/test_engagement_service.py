"""点赞 / 评论"""

from unittest.mock import AsyncMock

import pytest
from uuid_utils.compat import uuid7

from sns.core.error_codes import ErrorCode
from sns.modules.engagement.exceptions import AlreadyLikedError
from sns.modules.post.exceptions import PostNotFoundError
from sns.modules.user.exceptions import UserNotFoundError


@pytest.fixture
async def post_id(services):
    await services.users.join("alice", "pw1", "a@x.com", "Al")
    await services.users.join("bob", "pw2", "b@x.com", "Bo")
    post = await services.posts.create("T", "B", "alice")
    return post.id


async def test_like_then_like_again_fails(services, post_id):
    await services.engagement.like(post_id, "alice")

    with pytest.raises(AlreadyLikedError) as exc_info:
        await services.engagement.like(post_id, "alice")
    assert exc_info.value.code == ErrorCode.ALREADY_LIKED
    assert exc_info.value.status_code == 409

    assert await services.engagement.like_count(post_id) == 1


async def test_like_count_counts_distinct_users(services, post_id):
    names = ["bob", "carol", "dave"]
    for name in names[1:]:
        await services.users.join(name, "pw", f"{name}@x.com", name)

    assert await services.engagement.like_count(post_id) == 0
    for name in names:
        await services.engagement.like(post_id, name)

    assert await services.engagement.like_count(post_id) == len(names)


async def test_like_on_missing_post_fails(services, post_id):
    with pytest.raises(PostNotFoundError):
        await services.engagement.like(uuid7(), "alice")


async def test_like_by_missing_user_fails(services, post_id):
    with pytest.raises(UserNotFoundError):
        await services.engagement.like(post_id, "ghost")


async def test_like_on_deleted_post_fails(services, post_id):
    await services.posts.delete("alice", post_id)

    with pytest.raises(PostNotFoundError):
        await services.engagement.like(post_id, "bob")
    with pytest.raises(PostNotFoundError):
        await services.engagement.like_count(post_id)


async def test_like_count_on_missing_post_fails(services, post_id):
    with pytest.raises(PostNotFoundError):
        await services.engagement.like_count(uuid7())


async def test_unique_constraint_is_final_guard(services, post_id, db, monkeypatch):
    """预检查看不到并发写入时，唯一约束的冲突被转换为 AlreadyLiked"""
    await services.engagement.like(post_id, "bob")
    await db.commit()

    monkeypatch.setattr(
        services.engagement.like_repo,
        "get_by_user_and_post",
        AsyncMock(return_value=None),
    )
    with pytest.raises(AlreadyLikedError):
        await services.engagement.like(post_id, "bob")
    await db.rollback()

    assert await services.engagement.like_count(post_id) == 1


async def test_comment_and_list_in_creation_order(services, post_id):
    first = await services.engagement.comment(post_id, "bob", "first!")
    await services.engagement.comment(post_id, "alice", "thanks")
    await services.engagement.comment(post_id, "bob", "third")

    assert first.comment == "first!"
    assert first.post_id == post_id
    assert first.user.username == "bob"

    items, total = await services.engagement.list_comments(post_id)
    assert total == 3
    assert [c.comment for c in items] == ["first!", "thanks", "third"]

    page, _ = await services.engagement.list_comments(post_id, page=1, page_size=2)
    assert [c.comment for c in page] == ["third"]


async def test_comment_on_missing_post_fails(services, post_id):
    with pytest.raises(PostNotFoundError):
        await services.engagement.comment(uuid7(), "bob", "hello")


async def test_comment_by_missing_user_fails(services, post_id):
    with pytest.raises(UserNotFoundError):
        await services.engagement.comment(post_id, "ghost", "hello")


async def test_list_comments_on_missing_post_fails(services):
    with pytest.raises(PostNotFoundError):
        await services.engagement.list_comments(uuid7())
