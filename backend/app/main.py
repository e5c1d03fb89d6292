"""FastAPI 应用入口"""
import logging
import logging.config

from .config import settings

# 日志配置：始终输出到控制台，配置 LOG_FILE 时同时写入文件
_handlers = {
    "console": {
        "class": "logging.StreamHandler",
        "formatter": "standard",
    }
}
if settings.LOG_FILE:
    _handlers["file"] = {
        "class": "logging.FileHandler",
        "formatter": "standard",
        "filename": settings.LOG_FILE,
        "mode": "a",
        "encoding": "utf-8",
    }

logging.config.dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(asctime)s %(levelname)s:%(name)s:%(message)s"}
    },
    "handlers": _handlers,
    "root": {
        "level": "WARNING",
        "handlers": list(_handlers),
    },
    "loggers": {
        "app": {"level": settings.LOG_LEVEL},
        "uvicorn": {"level": "INFO"},
    },
})

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from .database import init_db, engine
from .api import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时
    await init_db()
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} 启动成功")
    yield
    # 关闭时
    await engine.dispose()
    logger.info("应用关闭完成")


# 创建应用
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="个人待办清单 API",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== 异常处理 ====================

def _format_validation_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    msg = error.get("msg", "参数无效")
    # pydantic 的 ValueError 消息带有前缀
    msg = msg.removeprefix("Value error, ")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """请求参数校验失败统一返回 400"""
    errors = exc.errors()
    messages = [_format_validation_error(e) for e in errors]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": messages[0] if messages else "参数校验失败", "errors": messages},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """未预期的异常只记录日志，不向客户端泄露细节"""
    logger.exception(f"[API] {request.method} {request.url.path} 处理失败")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "服务器内部错误"},
    )


# 注册路由
app.include_router(api_router, prefix="/api")


# 健康检查
@app.get("/health", tags=["系统"], summary="健康检查")
async def health_check():
    """检查服务运行状态"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


# 根路由
@app.get("/", tags=["系统"], summary="欢迎页")
async def root():
    """返回 API 基本信息"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs"
    }
