"""通知模块 - 业务逻辑层"""

from uuid import UUID

from sns.modules.user.service import UserService

from .models import Alarm, AlarmType
from .repository import AlarmRepository
from .schemas import AlarmResponse


class AlarmService:
    def __init__(self, repository: AlarmRepository, user_service: UserService) -> None:
        self.repository = repository
        self.user_service = user_service

    async def record(
        self,
        recipient_id: UUID,
        alarm_type: AlarmType,
        from_user_id: UUID,
        target_id: UUID,
    ) -> Alarm:
        """写入一条通知（与触发它的互动处于同一事务）"""
        alarm = Alarm(
            user_id=recipient_id,
            alarm_type=alarm_type,
            from_user_id=from_user_id,
            target_id=target_id,
        )
        return await self.repository.create(alarm)

    async def list(
        self, username: str, page: int = 0, page_size: int = 20
    ) -> tuple[list[AlarmResponse], int]:
        """接收者的通知列表"""
        user = await self.user_service.get_entity(username)
        alarms, total = await self.repository.get_list_by_user(
            user.id, page=page, page_size=page_size
        )
        return [AlarmResponse.model_validate(a) for a in alarms], total
