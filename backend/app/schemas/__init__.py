"""Pydantic Schemas"""
from .base import CamelModel, UTCDateTime
from .user import (
    UserRegister, UserLogin, RegisterResponse, UserUpdate, PasswordChange,
    UserResponse, Token,
)
from .category import CategoryCreate, CategoryUpdate, CategorySummary, CategoryResponse
from .todo import TodoCreate, TodoUpdate, TodoToggle, TodoResponse

__all__ = [
    "CamelModel", "UTCDateTime",
    "UserRegister", "UserLogin", "RegisterResponse", "UserUpdate", "PasswordChange",
    "UserResponse", "Token",
    "CategoryCreate", "CategoryUpdate", "CategorySummary", "CategoryResponse",
    "TodoCreate", "TodoUpdate", "TodoToggle", "TodoResponse",
]
