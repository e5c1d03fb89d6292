"""业务异常

所有异常继承 HTTPException，由 FastAPI 直接映射为状态码和 detail 文本。
"""
from fastapi import HTTPException, status


class AppError(HTTPException):
    """业务异常基类"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "服务器内部错误"

    def __init__(self, detail: str = None, headers: dict = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class Unauthenticated(AppError):
    """未登录或令牌无效"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "未登录或登录已过期"

    def __init__(self, detail: str = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(AppError):
    """无权访问"""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "无权访问该资源"


class NotFound(AppError):
    """记录不存在或已删除"""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "资源不存在"


class InvalidReference(AppError):
    """引用的分类不存在或不属于当前用户"""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "分类不存在"


class ValidationFailed(AppError):
    """字段校验失败"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "参数校验失败"


class AlreadyExists(AppError):
    """用户名已存在"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "该用户名已被使用"


class InvalidCredentials(AppError):
    """登录失败（不区分用户名与密码错误）"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "用户名或密码错误"


class PersistenceFailed(AppError):
    """写入失败（影响行数为 0 或数据库错误）"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "数据保存失败"
