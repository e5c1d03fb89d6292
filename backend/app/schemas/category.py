"""分类相关 Schema"""
from pydantic import Field, field_validator
from typing import Optional

from .base import CamelModel, UTCDateTime
from ..models import DEFAULT_CATEGORY_COLOR

COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    color: str = Field(DEFAULT_CATEGORY_COLOR, pattern=COLOR_PATTERN)
    icon: Optional[str] = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("分类名称不能为空")
        return v

    @field_validator("icon")
    @classmethod
    def blank_icon_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


class CategoryCreate(CategoryBase):
    """创建分类"""


class CategoryUpdate(CategoryBase):
    """更新分类（整体替换）"""
    color: str = Field(..., pattern=COLOR_PATTERN)


class CategorySummary(CamelModel):
    """嵌入待办中的分类摘要"""
    id: int
    name: str
    color: str
    icon: Optional[str] = None


class CategoryResponse(CategorySummary):
    """分类响应"""
    created_at: UTCDateTime
    todo_count: int = 0
