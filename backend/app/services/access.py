"""所有权校验

对待办和分类的单条读取与所有修改操作，都先经过 load_owned。
"""
import logging
from typing import Any

from ..config import settings
from ..exceptions import Forbidden, NotFound
from ..models import User
from ..repositories import BaseRepository

logger = logging.getLogger(__name__)


async def load_owned(repository: BaseRepository, record_id: Any, caller: User):
    """加载记录并校验归属

    - 记录不存在或已软删除: NotFound
    - 记录属于他人: Forbidden（HIDE_FOREIGN_RECORDS 开启时为 NotFound）
    """
    record = await repository.get(record_id)
    if record is None:
        raise NotFound(f"{repository.label}不存在")

    if record.user_id != caller.id:
        logger.info(f"[Access] 用户 {caller.id} 访问他人{repository.label} {record_id} 被拒绝")
        if settings.HIDE_FOREIGN_RECORDS:
            raise NotFound(f"{repository.label}不存在")
        raise Forbidden(f"无权访问该{repository.label}")

    return record
