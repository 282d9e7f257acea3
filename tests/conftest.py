"""共享测试配置：内存 SQLite + 服务实例 + HTTP 客户端"""

import os

# 必须在导入 sns 之前设置（Settings 在导入 sns.main 时加载）
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DB_DSN", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dataclasses import dataclass
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from sns.core.database import Base, get_db
from sns.main import app
from sns.modules.alarm.repository import AlarmRepository
from sns.modules.alarm.service import AlarmService
from sns.modules.auth.service import AuthService
from sns.modules.engagement.repository import CommentRepository, LikeRepository
from sns.modules.engagement.service import EngagementService
from sns.modules.post.repository import PostRepository
from sns.modules.post.service import PostService
from sns.modules.user.repository import UserRepository
from sns.modules.user.service import UserService

TEST_SECRET = os.environ["SECRET_KEY"]
TEST_TTL = timedelta(minutes=30)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@dataclass
class Services:
    users: UserService
    auth: AuthService
    posts: PostService
    engagement: EngagementService
    alarms: AlarmService


@pytest.fixture
def services(db) -> Services:
    """与请求内依赖注入相同的装配方式，共享一个会话"""
    user_repo = UserRepository(db)
    users = UserService(user_repo)
    posts = PostService(PostRepository(db), users)
    alarms = AlarmService(AlarmRepository(db), users)
    return Services(
        users=users,
        auth=AuthService(user_repo, secret_key=TEST_SECRET, token_ttl=TEST_TTL),
        posts=posts,
        engagement=EngagementService(
            LikeRepository(db), CommentRepository(db), posts, users, alarms
        ),
        alarms=alarms,
    )


@pytest.fixture
async def client(test_session_factory):
    """FastAPI 测试客户端（get_db 指向测试库）"""

    async def override_get_db():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c
    app.dependency_overrides.clear()
