"""数据访问层"""
from .base import BaseRepository
from .user import UserRepository
from .category import CategoryRepository
from .todo import TodoRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CategoryRepository",
    "TodoRepository",
]
