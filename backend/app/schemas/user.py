"""用户相关 Schema"""
from pydantic import Field, field_validator, model_validator
from typing import Optional
import re

from .base import CamelModel, UTCDateTime

USERNAME_PATTERN = r"^[A-Za-z0-9._@+-]+$"


def check_password_policy(password: str) -> str:
    """密码策略：大小写字母、数字、特殊字符各至少一个"""
    if not re.search(r"[A-Z]", password):
        raise ValueError("密码必须包含至少一个大写字母")
    if not re.search(r"[a-z]", password):
        raise ValueError("密码必须包含至少一个小写字母")
    if not re.search(r"[0-9]", password):
        raise ValueError("密码必须包含至少一个数字")
    if not re.search(r"[^a-zA-Z0-9]", password):
        raise ValueError("密码必须包含至少一个特殊字符")
    return password


def check_full_name(full_name: str) -> str:
    """去除首尾空白，不允许为空"""
    full_name = full_name.strip()
    if not full_name:
        raise ValueError("姓名不能为空")
    return full_name


class UserRegister(CamelModel):
    """用户注册"""
    full_name: str = Field(..., min_length=1, max_length=50)
    username: str = Field(..., min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=6, max_length=100)
    confirm_password: str

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: str) -> str:
        return check_full_name(v)

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        return check_password_policy(v)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("两次输入的密码不一致")
        return self


class UserLogin(CamelModel):
    """用户登录"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterResponse(CamelModel):
    """注册响应（不含密码字段）"""
    username: str
    full_name: str


class UserUpdate(CamelModel):
    """用户更新"""
    full_name: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return check_full_name(v)


class PasswordChange(CamelModel):
    """修改密码"""
    current_password: str
    new_password: str = Field(..., min_length=6, max_length=100)

    @field_validator("new_password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        return check_password_policy(v)


class UserResponse(CamelModel):
    """用户响应"""
    id: str
    username: str
    full_name: str
    is_active: bool
    todo_points: int = 0
    created_at: UTCDateTime


class Token(CamelModel):
    """Token 响应"""
    access_token: str
    token_type: str = "bearer"
    expires_at: UTCDateTime
