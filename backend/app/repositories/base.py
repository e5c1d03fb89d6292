"""仓储基类

所有读取都经过 visible()，统一过滤已软删除（或已停用）的记录。
"""
import logging
from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Base
from ..exceptions import PersistenceFailed

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """单表 CRUD"""
    model: type = None
    label: str = "记录"

    def __init__(self, db: AsyncSession):
        self.db = db

    def visible_clause(self):
        """可见记录条件"""
        return self.model.is_deleted == False  # noqa: E712

    def load_options(self) -> Sequence:
        """查询时预加载的关系"""
        return ()

    def visible(self):
        """可见记录视图"""
        return select(self.model).where(self.visible_clause()).options(*self.load_options())

    async def get(self, record_id: Any) -> Optional[ModelT]:
        """按 ID 获取，已删除视为不存在"""
        result = await self.db.execute(
            self.visible()
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner_id: str, *criteria, order_by=None) -> list[ModelT]:
        """获取某用户的全部可见记录"""
        query = self.visible().where(self.model.user_id == owner_id, *criteria)
        if order_by is not None:
            query = query.order_by(*order_by)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(self, record: ModelT) -> ModelT:
        """新增记录"""
        self.db.add(record)
        try:
            await self.db.flush()
        except IntegrityError:
            # 唯一约束冲突交给调用方映射
            raise
        except SQLAlchemyError as e:
            logger.error(f"[DB] 新增{self.label}失败: {e}")
            raise PersistenceFailed(f"{self.label}创建失败") from e
        await self.db.refresh(record)
        return record

    async def update(self, record_id: Any, values: dict) -> None:
        """按字段差异写回，影响行数为 0 时报错"""
        stmt = (
            update(self.model)
            .where(self.model.id == record_id, self.visible_clause())
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"[DB] 更新{self.label} {record_id} 失败: {e}")
            raise PersistenceFailed(f"{self.label}更新失败") from e
        if result.rowcount == 0:
            logger.warning(f"[DB] 更新{self.label} {record_id} 影响行数为 0")
            raise PersistenceFailed(f"{self.label}更新失败")

    async def soft_delete(self, record_id: Any) -> None:
        """软删除"""
        await self.update(record_id, {"is_deleted": True})
