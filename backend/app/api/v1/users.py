"""用户路由"""
from fastapi import APIRouter, Depends, status

from ...models import User
from ...schemas import UserResponse, UserUpdate, PasswordChange
from ...services import AuthService
from ..deps import get_current_user, get_auth_service

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """获取当前用户信息"""
    return current_user


@router.patch("/me", response_model=UserResponse)
async def update_me(
    user_in: UserUpdate,
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """更新当前用户信息"""
    return await auth.update_profile(current_user, user_in)


@router.patch("/me/password")
async def change_password(
    password_in: PasswordChange,
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """修改密码"""
    await auth.change_password(current_user, password_in)
    return {"message": "密码修改成功"}


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_me(
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service),
):
    """停用当前账号"""
    await auth.deactivate(current_user)
