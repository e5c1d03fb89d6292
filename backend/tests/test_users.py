"""用户接口测试"""
import pytest
from sqlalchemy import select

from app.models import Todo

pytestmark = pytest.mark.asyncio


async def test_get_me(client, alice):
    response = await client.get("/api/users/me", headers=alice)

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "alice"
    assert body["fullName"] == "Alice A"
    assert body["isActive"] is True
    assert body["todoPoints"] == 0
    assert "passwordHash" not in body


async def test_update_full_name(client, alice):
    response = await client.patch("/api/users/me", json={"fullName": "  Alice B  "}, headers=alice)

    assert response.status_code == 200
    assert response.json()["fullName"] == "Alice B"


async def test_blank_full_name_rejected(client, alice):
    response = await client.patch("/api/users/me", json={"fullName": "   "}, headers=alice)

    assert response.status_code == 400
    me = await client.get("/api/users/me", headers=alice)
    assert me.json()["fullName"] == "Alice A"


async def test_change_password(client, alice):
    response = await client.patch(
        "/api/users/me/password",
        json={"currentPassword": "Secret1!", "newPassword": "Better2@"},
        headers=alice,
    )
    assert response.status_code == 200

    old = await client.post("/api/auth/login", json={"username": "alice", "password": "Secret1!"})
    new = await client.post("/api/auth/login", json={"username": "alice", "password": "Better2@"})
    assert old.status_code == 401
    assert new.status_code == 200


async def test_change_password_requires_current_password(client, alice):
    response = await client.patch(
        "/api/users/me/password",
        json={"currentPassword": "Wrong1!!", "newPassword": "Better2@"},
        headers=alice,
    )

    assert response.status_code == 400


async def test_completing_todos_earns_points(client, alice):
    created = await client.post("/api/todos", json={"content": "write report"}, headers=alice)
    todo_id = created.json()["id"]

    await client.patch(f"/api/todos/{todo_id}/toggle", headers=alice)
    me = await client.get("/api/users/me", headers=alice)
    assert me.json()["todoPoints"] == 1

    await client.patch(f"/api/todos/{todo_id}/toggle", headers=alice)
    me = await client.get("/api/users/me", headers=alice)
    assert me.json()["todoPoints"] == 0


async def test_deactivation_keeps_owned_records(client, alice, db):
    await client.post("/api/todos", json={"content": "keep me"}, headers=alice)
    await client.delete("/api/users/me", headers=alice)

    result = await db.execute(select(Todo))
    todos = result.scalars().all()
    assert len(todos) == 1
    assert todos[0].is_deleted is False
