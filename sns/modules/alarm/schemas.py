"""通知模块 - Schema"""

from uuid import UUID

from pydantic import computed_field

from sns.schemas.datetime_types import UTCDateTime
from sns.schemas.response import BaseSchema

from .models import AlarmType


class AlarmResponse(BaseSchema):
    """通知响应模型"""

    id: UUID
    alarm_type: AlarmType
    from_user_id: UUID
    target_id: UUID
    created_at: UTCDateTime

    @computed_field
    @property
    def text(self) -> str:
        return self.alarm_type.text
