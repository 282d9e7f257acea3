"""帖子：创建 / 修改 / 删除 / 列表与归属校验"""

import pytest
from uuid_utils.compat import uuid7

from sns.core.error_codes import ErrorCode
from sns.modules.post.exceptions import PermissionDeniedError, PostNotFoundError
from sns.modules.user.exceptions import UserNotFoundError
from sns.modules.user.models import UserRole


@pytest.fixture
async def alice_and_bob(services):
    await services.users.join("alice", "pw1", "a@x.com", "Al")
    await services.users.join("bob", "pw2", "b@x.com", "Bo")


async def test_create_post_owned_by_author(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")

    assert post.title == "T"
    assert post.body == "B"
    assert post.user.username == "alice"


async def test_create_post_for_missing_user_fails(services):
    with pytest.raises(UserNotFoundError):
        await services.posts.create("T", "B", "ghost")


async def test_owner_can_modify(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")

    modified = await services.posts.modify("T2", "B2", "alice", post.id)

    assert modified.id == post.id
    assert modified.title == "T2"
    assert modified.body == "B2"
    assert modified.updated_at >= post.updated_at


async def test_non_owner_cannot_modify(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")

    with pytest.raises(PermissionDeniedError) as exc_info:
        await services.posts.modify("T2", "B2", "bob", post.id)
    assert exc_info.value.code == ErrorCode.PERMISSION_DENIED
    assert "bob" in exc_info.value.message

    unchanged = (await services.posts.list())[0][0]
    assert unchanged.title == "T"


async def test_admin_role_does_not_bypass_ownership(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")
    bob = await services.users.get_entity("bob")
    bob.role = UserRole.ADMIN

    with pytest.raises(PermissionDeniedError):
        await services.posts.modify("T2", "B2", "bob", post.id)


@pytest.mark.parametrize("caller", ["alice", "bob", "ghost"])
async def test_modify_missing_post_fails_for_any_caller(services, alice_and_bob, caller):
    with pytest.raises(PostNotFoundError) as exc_info:
        await services.posts.modify("T2", "B2", caller, uuid7())
    assert exc_info.value.status_code == 404


async def test_modify_by_missing_user_fails(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")

    with pytest.raises(UserNotFoundError):
        await services.posts.modify("T2", "B2", "ghost", post.id)


@pytest.mark.parametrize("caller", ["alice", "ghost"])
async def test_delete_missing_post_fails_for_any_caller(services, alice_and_bob, caller):
    with pytest.raises(PostNotFoundError):
        await services.posts.delete(caller, uuid7())


async def test_owner_can_delete(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")

    await services.posts.delete("alice", post.id)

    items, total = await services.posts.list()
    assert items == []
    assert total == 0


async def test_non_owner_cannot_delete(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")

    with pytest.raises(PermissionDeniedError):
        await services.posts.delete("bob", post.id)

    _, total = await services.posts.list()
    assert total == 1


async def test_deleted_post_is_terminal(services, alice_and_bob):
    post = await services.posts.create("T", "B", "alice")
    await services.posts.delete("alice", post.id)

    with pytest.raises(PostNotFoundError):
        await services.posts.modify("T2", "B2", "alice", post.id)
    with pytest.raises(PostNotFoundError):
        await services.posts.delete("alice", post.id)


async def test_list_is_newest_first_and_paged(services, alice_and_bob):
    for i in range(5):
        await services.posts.create(f"T{i}", "B", "alice" if i % 2 else "bob")

    first_page, total = await services.posts.list(page=0, page_size=2)
    second_page, _ = await services.posts.list(page=1, page_size=2)
    last_page, _ = await services.posts.list(page=2, page_size=2)

    assert total == 5
    assert [p.title for p in first_page] == ["T4", "T3"]
    assert [p.title for p in second_page] == ["T2", "T1"]
    assert [p.title for p in last_page] == ["T0"]


async def test_my_lists_only_owner_posts(services, alice_and_bob):
    await services.posts.create("A1", "B", "alice")
    await services.posts.create("B1", "B", "bob")
    await services.posts.create("A2", "B", "alice")

    items, total = await services.posts.my("alice")

    assert total == 2
    assert [p.title for p in items] == ["A2", "A1"]
    assert all(p.user.username == "alice" for p in items)


async def test_my_for_missing_user_fails(services):
    with pytest.raises(UserNotFoundError):
        await services.posts.my("ghost")
