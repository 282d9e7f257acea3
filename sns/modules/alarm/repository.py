"""通知模块 - 数据访问层"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sns.core.database import filter_active

from .models import Alarm


class AlarmRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_list_by_user(
        self, user_id: UUID, page: int = 0, page_size: int = 20
    ) -> tuple[list[Alarm], int]:
        """接收者的通知，最新在前"""
        base = filter_active(select(Alarm).where(Alarm.user_id == user_id))
        total = await self.db.scalar(select(func.count()).select_from(base.subquery())) or 0

        stmt = (
            base.order_by(Alarm.created_at.desc(), Alarm.id.desc())
            .offset(page * page_size)
            .limit(page_size)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all()), total

    async def create(self, alarm: Alarm) -> Alarm:
        self.db.add(alarm)
        await self.db.flush()
        return alarm
