"""待办业务规则"""
import logging
from datetime import date, datetime, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InvalidReference, NotFound
from ..models import Todo, User, Priority
from ..repositories import TodoRepository, CategoryRepository, UserRepository
from ..schemas import TodoCreate, TodoUpdate
from ..utils import to_utc_naive, utc_day_bounds
from .access import load_owned

logger = logging.getLogger(__name__)


def derive_priority(due_date: Optional[datetime], now: Optional[datetime] = None) -> Priority:
    """根据截止时间推导优先级（均为 UTC）"""
    if due_date is None:
        return Priority.MEDIUM
    now = now or datetime.utcnow()
    remaining = due_date - now
    if remaining <= timedelta(days=1):
        return Priority.URGENT
    if remaining <= timedelta(days=3):
        return Priority.HIGH
    if remaining <= timedelta(days=7):
        return Priority.MEDIUM
    return Priority.LOW


class TodoService:
    """待办"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.todos = TodoRepository(db)
        self.categories = CategoryRepository(db)
        self.users = UserRepository(db)

    async def _check_category(self, category_id: Optional[int], caller: User) -> None:
        if category_id is None:
            return
        if not await self.categories.exists_for_owner(category_id, caller.id):
            raise InvalidReference("分类不存在")

    async def _reload(self, todo_id: int) -> Todo:
        # 写入后重新读取，期间被并发删除则视为不存在
        todo = await self.todos.get(todo_id)
        if todo is None:
            raise NotFound("待办不存在")
        return todo

    async def create(self, caller: User, todo_in: TodoCreate) -> Todo:
        await self._check_category(todo_in.category_id, caller)

        due_date = to_utc_naive(todo_in.due_date)
        priority = todo_in.priority if todo_in.priority is not None else derive_priority(due_date)

        todo = Todo(
            user_id=caller.id,
            content=todo_in.content,
            due_date=due_date,
            priority=int(priority),
            category_id=todo_in.category_id,
            is_completed=False,
            is_deleted=False,
            created_at=datetime.utcnow(),
        )
        todo = await self.todos.create(todo)
        logger.info(f"[Todo] 用户 {caller.id} 创建待办 {todo.id}")
        return await self._reload(todo.id)

    async def get(self, caller: User, todo_id: int) -> Todo:
        return await load_owned(self.todos, todo_id, caller)

    async def list_all(
        self,
        caller: User,
        completed: Optional[bool] = None,
        category_id: Optional[int] = None,
    ) -> list[Todo]:
        return await self.todos.list_by_owner(caller.id, completed=completed, category_id=category_id)

    async def list_today(self, caller: User, today: Optional[date] = None) -> list[Todo]:
        """截止日期（UTC）为今天的待办"""
        start, end = utc_day_bounds(today or datetime.utcnow().date())
        return await self.todos.list_due_between(caller.id, start, end)

    async def update(self, caller: User, todo_id: int, todo_in: TodoUpdate) -> Todo:
        """整体更新内容、截止时间、优先级和分类，不改变完成状态"""
        await load_owned(self.todos, todo_id, caller)
        await self._check_category(todo_in.category_id, caller)

        due_date = to_utc_naive(todo_in.due_date)
        priority = todo_in.priority if todo_in.priority is not None else derive_priority(due_date)

        await self.todos.update(todo_id, {
            "content": todo_in.content,
            "due_date": due_date,
            "priority": int(priority),
            "category_id": todo_in.category_id,
        })
        logger.info(f"[Todo] 用户 {caller.id} 更新待办 {todo_id}")
        return await self._reload(todo_id)

    async def toggle(self, caller: User, todo_id: int, is_completed: Optional[bool] = None) -> Todo:
        """切换完成状态；指定 is_completed 时直接设置为该值"""
        todo = await load_owned(self.todos, todo_id, caller)
        previous = todo.is_completed
        target = (not previous) if is_completed is None else is_completed

        await self.todos.update(todo_id, {"is_completed": target})
        if target != previous:
            await self.users.adjust_points(caller.id, 1 if target else -1)

        logger.info(f"[Todo] 待办 {todo_id} 完成状态: {previous} -> {target}")
        return await self._reload(todo_id)

    async def delete(self, caller: User, todo_id: int) -> None:
        await load_owned(self.todos, todo_id, caller)
        await self.todos.soft_delete(todo_id)
        logger.info(f"[Todo] 用户 {caller.id} 删除待办 {todo_id}")
