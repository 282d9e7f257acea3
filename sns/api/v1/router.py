"""API v1 路由聚合"""

from fastapi import APIRouter

from sns.modules.alarm.router import router as alarm_router
from sns.modules.auth.router import router as auth_router
from sns.modules.engagement.router import router as engagement_router
from sns.modules.post.router import router as post_router
from sns.modules.user.router import router as user_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(user_router, prefix="/users", tags=["users"])
api_router.include_router(post_router, prefix="/posts", tags=["posts"])
api_router.include_router(engagement_router, prefix="/posts", tags=["engagement"])
api_router.include_router(alarm_router, prefix="/alarms", tags=["alarms"])
