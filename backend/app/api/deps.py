"""路由依赖"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..exceptions import Unauthenticated
from ..models import User
from ..repositories import UserRepository
from ..services import AuthService, CategoryService, TodoService
from ..utils.security import decode_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """从 Bearer 令牌解析当前用户，停用的用户视同不存在"""
    if credentials is None:
        raise Unauthenticated("未提供访问令牌")

    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access" or not payload.get("sub"):
        raise Unauthenticated("无效的访问令牌")

    user = await UserRepository(db).get(payload["sub"])
    if user is None:
        raise Unauthenticated("用户不存在或已被禁用")
    return user


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_todo_service(db: AsyncSession = Depends(get_db)) -> TodoService:
    return TodoService(db)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)
