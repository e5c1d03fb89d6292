"""应用配置"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path
import os

# 确定项目根目录（支持本地开发和 Docker 部署）
# 本地开发: backend/app/config.py -> 项目根目录是 ../../
# Docker: /app/app/config.py -> 数据目录是 /app/data
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent  # backend 目录
_project_root = _backend_dir.parent  # 项目根目录

# 检测运行环境
if os.path.exists("/app/data"):
    # Docker 环境
    _data_dir = Path("/app/data")
    _env_file = Path("/app/.env") if Path("/app/.env").exists() else None
else:
    # 本地开发环境
    _data_dir = _project_root / "data"
    _env_file = _project_root / ".env" if (_project_root / ".env").exists() else None


class Settings(BaseSettings):
    """应用设置

    取值顺序：环境变量 > .env 文件 > 默认值。
    JWT_SECRET_KEY 没有默认值，缺失时启动即失败。
    """
    # 应用
    APP_NAME: str = "Todo App"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 数据库（默认使用项目根目录的 data 文件夹）
    DATABASE_URL: str = f"sqlite+aiosqlite:///{_data_dir}/todo.db"

    # JWT
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: Optional[str] = None
    JWT_AUDIENCE: Optional[str] = None
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # 密码哈希（bcrypt 轮数）
    PASSWORD_HASH_ROUNDS: int = 12

    # 权限：为 True 时他人的记录一律返回 404（隐藏存在性），否则返回 403
    HIDE_FOREIGN_RECORDS: bool = False

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS（前端开发端口）
    CORS_ORIGINS: list[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
        "https://localhost",
    ]

    class Config:
        env_file = str(_env_file) if _env_file else ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()


settings = get_settings()
