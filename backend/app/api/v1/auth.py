"""认证路由"""
from fastapi import APIRouter, Depends, status

from ...schemas import UserRegister, UserLogin, RegisterResponse, Token
from ...services import AuthService
from ..deps import get_auth_service

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(user_in: UserRegister, auth: AuthService = Depends(get_auth_service)):
    """用户注册"""
    user = await auth.register(user_in)
    return RegisterResponse(username=user.username, full_name=user.full_name)


@router.post("/login", response_model=Token)
async def login(user_in: UserLogin, auth: AuthService = Depends(get_auth_service)):
    """用户登录，返回访问令牌及过期时间"""
    return await auth.login(user_in)
