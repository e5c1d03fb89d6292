"""API 路由"""
from fastapi import APIRouter
from .v1 import auth, users, todos, categories

api_router = APIRouter()

# 注册路由
api_router.include_router(auth.router, prefix="/auth", tags=["认证"])
api_router.include_router(users.router, prefix="/users", tags=["用户"])
api_router.include_router(todos.router, prefix="/todos", tags=["待办"])
api_router.include_router(categories.router, prefix="/categories", tags=["分类"])
