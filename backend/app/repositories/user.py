"""用户仓储"""
from typing import Optional

from sqlalchemy import select, case

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
    label = "用户"

    def visible_clause(self):
        # 停用的用户视同不存在
        return User.is_active == True  # noqa: E712

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(self.visible().where(User.username == username))
        return result.scalar_one_or_none()

    async def username_taken(self, username: str) -> bool:
        """用户名是否已被占用（包括已停用的账号）"""
        result = await self.db.execute(select(User.id).where(User.username == username))
        return result.first() is not None

    async def deactivate(self, user_id: str) -> None:
        await self.update(user_id, {"is_active": False})

    async def adjust_points(self, user_id: str, delta: int) -> None:
        """调整积分，最低为 0"""
        new_points = User.todo_points + delta
        await self.update(user_id, {"todo_points": case((new_points < 0, 0), else_=new_points)})
