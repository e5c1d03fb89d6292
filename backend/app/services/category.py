"""分类业务规则"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Category, User
from ..repositories import CategoryRepository
from ..schemas import CategoryCreate, CategoryUpdate
from .access import load_owned

logger = logging.getLogger(__name__)


class CategoryService:
    """分类

    返回的 Category 带有 todo_count 属性（未删除待办数量）。
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.categories = CategoryRepository(db)

    async def _with_counts(self, categories: list[Category]) -> list[Category]:
        counts = await self.categories.todo_counts(c.id for c in categories)
        for category in categories:
            category.todo_count = counts.get(category.id, 0)
        return categories

    async def list_all(self, caller: User) -> list[Category]:
        categories = await self.categories.list_by_owner(caller.id)
        return await self._with_counts(categories)

    async def get(self, caller: User, category_id: int) -> Category:
        category = await load_owned(self.categories, category_id, caller)
        (category,) = await self._with_counts([category])
        return category

    async def create(self, caller: User, category_in: CategoryCreate) -> Category:
        category = Category(
            user_id=caller.id,
            name=category_in.name,
            color=category_in.color,
            icon=category_in.icon,
            is_deleted=False,
        )
        category = await self.categories.create(category)
        category.todo_count = 0
        logger.info(f"[Category] 用户 {caller.id} 创建分类 {category.id}")
        return category

    async def update(self, caller: User, category_id: int, category_in: CategoryUpdate) -> Category:
        await load_owned(self.categories, category_id, caller)
        await self.categories.update(category_id, {
            "name": category_in.name,
            "color": category_in.color,
            "icon": category_in.icon,
        })
        logger.info(f"[Category] 用户 {caller.id} 更新分类 {category_id}")
        return await self.get(caller, category_id)

    async def delete(self, caller: User, category_id: int) -> int:
        """删除分类，其下待办保留但解除关联；返回解除关联的数量"""
        await load_owned(self.categories, category_id, caller)
        return await self.categories.delete_and_detach(category_id)
