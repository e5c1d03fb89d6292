"""数据模型"""
from .user import User
from .category import Category, DEFAULT_CATEGORY_COLOR
from .todo import Todo, Priority

__all__ = [
    "User",
    "Category", "DEFAULT_CATEGORY_COLOR",
    "Todo", "Priority",
]
