"""待办相关 Schema"""
from pydantic import Field
from datetime import datetime
from typing import Optional

from .base import CamelModel, UTCDateTime
from .category import CategorySummary
from ..models import Priority


class TodoCreate(CamelModel):
    """创建待办，未指定优先级时按截止时间推导"""
    content: str = Field(..., min_length=1, max_length=200)
    due_date: Optional[datetime] = None
    priority: Optional[Priority] = None
    category_id: Optional[int] = None


class TodoUpdate(TodoCreate):
    """更新待办（整体替换，不改变完成状态）"""


class TodoToggle(CamelModel):
    """切换完成状态，指定 is_completed 时直接设置"""
    is_completed: Optional[bool] = None


class TodoResponse(CamelModel):
    """待办响应"""
    id: int
    content: str
    is_completed: bool
    created_at: UTCDateTime
    due_date: Optional[UTCDateTime] = None
    priority: Priority
    category_id: Optional[int] = None
    category: Optional[CategorySummary] = None
