"""分类仓储"""
import logging
from typing import Iterable

from sqlalchemy import select, update, func
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import PersistenceFailed
from ..models import Category, Todo
from .base import BaseRepository

logger = logging.getLogger(__name__)


class CategoryRepository(BaseRepository[Category]):
    model = Category
    label = "分类"

    async def list_by_owner(self, owner_id: str, *criteria) -> list[Category]:
        return await super().list_by_owner(
            owner_id, *criteria, order_by=(Category.created_at, Category.id)
        )

    async def exists_for_owner(self, category_id: int, owner_id: str) -> bool:
        """分类存在、未删除且属于该用户"""
        result = await self.db.execute(
            select(Category.id).where(
                Category.id == category_id,
                Category.user_id == owner_id,
                self.visible_clause(),
            )
        )
        return result.first() is not None

    async def todo_counts(self, category_ids: Iterable[int]) -> dict[int, int]:
        """各分类下未删除待办的数量"""
        ids = list(category_ids)
        if not ids:
            return {}
        result = await self.db.execute(
            select(Todo.category_id, func.count(Todo.id))
            .where(Todo.category_id.in_(ids), Todo.is_deleted == False)  # noqa: E712
            .group_by(Todo.category_id)
        )
        return {category_id: count for category_id, count in result.all()}

    async def delete_and_detach(self, category_id: int) -> int:
        """软删除分类并清空引用它的待办的分类字段

        两条语句处于同一事务，任一失败由会话整体回滚。返回解除关联的待办数量。
        """
        await self.soft_delete(category_id)
        try:
            result = await self.db.execute(
                update(Todo)
                .where(Todo.category_id == category_id)
                .values(category_id=None)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            logger.error(f"[Category] 分类 {category_id} 解除待办关联失败: {e}")
            raise PersistenceFailed("分类删除失败") from e
        detached = result.rowcount
        logger.info(f"[Category] 分类 {category_id} 已删除，解除关联待办 {detached} 条")
        return detached
