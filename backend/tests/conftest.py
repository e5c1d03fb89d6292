"""测试配置：导入应用前设置环境变量，每个测试重建数据表"""
import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="todo-app-test-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_tmp_dir}/test.db"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"

import httpx
import pytest
import pytest_asyncio

from app.database import Base, engine, AsyncSessionLocal
from app.main import app
from app.models import User

PASSWORD = "Secret1!"


@pytest_asyncio.fixture(autouse=True)
async def reset_db():
    """每个测试使用全新的数据表"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def db():
    """直接操作数据库的会话"""
    async with AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_user(client):
    """注册并登录，返回带 Bearer 令牌的请求头"""
    async def _make(username: str, password: str = PASSWORD, full_name: str = None) -> dict:
        response = await client.post("/api/auth/register", json={
            "fullName": full_name or username.title(),
            "username": username,
            "password": password,
            "confirmPassword": password,
        })
        assert response.status_code == 201, response.text
        response = await client.post("/api/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}
    return _make


@pytest_asyncio.fixture
async def alice(make_user):
    return await make_user("alice", full_name="Alice A")


@pytest_asyncio.fixture
async def bob(make_user):
    return await make_user("bob", full_name="Bob B")


@pytest_asyncio.fixture
async def owner(db):
    """服务层测试用的用户"""
    user = User(username="owner", full_name="Owner", password_hash="x")
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def stranger(db):
    user = User(username="stranger", full_name="Stranger", password_hash="x")
    db.add(user)
    await db.commit()
    return user
