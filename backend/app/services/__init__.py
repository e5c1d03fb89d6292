"""业务服务层"""
from .access import load_owned
from .auth import AuthService
from .category import CategoryService
from .todo import TodoService, derive_priority

__all__ = [
    "load_owned",
    "AuthService",
    "CategoryService",
    "TodoService", "derive_priority",
]
