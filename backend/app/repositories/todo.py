"""待办仓储"""
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import selectinload

from ..models import Todo
from .base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    model = Todo
    label = "待办"

    def load_options(self):
        return (selectinload(Todo.category),)

    async def list_by_owner(
        self,
        owner_id: str,
        *criteria,
        completed: Optional[bool] = None,
        category_id: Optional[int] = None,
    ) -> list[Todo]:
        if completed is not None:
            criteria += (Todo.is_completed == completed,)
        if category_id is not None:
            criteria += (Todo.category_id == category_id,)
        return await super().list_by_owner(
            owner_id, *criteria, order_by=(Todo.created_at.desc(), Todo.id.desc())
        )

    async def list_due_between(self, owner_id: str, start: datetime, end: datetime) -> list[Todo]:
        """截止时间在 [start, end) 内的待办"""
        return await self.list_by_owner(
            owner_id,
            Todo.due_date.is_not(None),
            Todo.due_date >= start,
            Todo.due_date < end,
        )
