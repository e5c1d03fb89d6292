"""账号与认证"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import AlreadyExists, InvalidCredentials, ValidationFailed
from ..models import User
from ..repositories import UserRepository
from ..schemas import UserRegister, UserLogin, UserUpdate, PasswordChange, Token
from ..utils.security import hash_password, verify_password, dummy_verify, create_access_token

logger = logging.getLogger(__name__)


class AuthService:
    """注册、登录与账号管理"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = UserRepository(db)

    async def register(self, user_in: UserRegister) -> User:
        if await self.users.username_taken(user_in.username):
            raise AlreadyExists("该用户名已被使用")

        user = User(
            username=user_in.username,
            full_name=user_in.full_name,
            password_hash=hash_password(user_in.password),
            is_active=True,
            todo_points=0,
        )
        try:
            user = await self.users.create(user)
        except IntegrityError as e:
            # 并发注册同名用户，检查通过后插入时撞上唯一索引
            logger.info(f"[Auth] 注册冲突: {user_in.username}")
            raise AlreadyExists("该用户名已被使用") from e
        logger.info(f"[Auth] 新用户注册: {user.username}")
        return user

    async def login(self, user_in: UserLogin) -> Token:
        # 用户不存在、已停用、密码错误返回同样的提示
        user = await self.users.get_by_username(user_in.username)
        if user is None:
            # 用户不存在时同样做一次哈希校验，响应耗时与密码错误一致
            dummy_verify()
        if user is None or not verify_password(user_in.password, user.password_hash):
            logger.info(f"[Auth] 登录失败: {user_in.username}")
            raise InvalidCredentials("用户名或密码错误")

        access_token, expires_at = create_access_token(user.id, user.username)
        logger.info(f"[Auth] 登录成功: {user.username}")
        return Token(access_token=access_token, expires_at=expires_at)

    async def update_profile(self, user: User, user_in: UserUpdate) -> User:
        if user_in.full_name is not None:
            await self.users.update(user.id, {"full_name": user_in.full_name})
        return await self.users.get(user.id)

    async def change_password(self, user: User, password_in: PasswordChange) -> None:
        if not verify_password(password_in.current_password, user.password_hash):
            raise ValidationFailed("原密码错误")
        await self.users.update(user.id, {"password_hash": hash_password(password_in.new_password)})
        logger.info(f"[Auth] 用户 {user.username} 修改密码")

    async def deactivate(self, user: User) -> None:
        """停用账号，名下数据保留"""
        await self.users.deactivate(user.id)
        logger.info(f"[Auth] 用户 {user.username} 已停用")
