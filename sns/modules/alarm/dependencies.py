"""通知模块 - 依赖注入"""

from typing import Annotated

from fastapi import Depends

from sns.dependencies import DBSession
from sns.modules.user.dependencies import get_user_service
from sns.modules.user.service import UserService

from .repository import AlarmRepository
from .service import AlarmService


def get_alarm_service(
    db: DBSession,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> AlarmService:
    return AlarmService(AlarmRepository(db), user_service)


AlarmServiceDep = Annotated[AlarmService, Depends(get_alarm_service)]
