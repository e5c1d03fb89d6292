"""服务层与数据访问层测试"""
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.database import AsyncSessionLocal
from app.exceptions import Forbidden, InvalidReference, NotFound, PersistenceFailed
from app.models import Category, Todo, Priority
from app.repositories import CategoryRepository, TodoRepository
from app.schemas import TodoCreate, CategoryCreate
from app.services import CategoryService, TodoService, load_owned, derive_priority


class TestDerivePriority:
    NOW = datetime(2030, 6, 1, 12, 0)

    @pytest.mark.parametrize("due, expected", [
        (None, Priority.MEDIUM),
        (NOW - timedelta(hours=1), Priority.URGENT),
        (NOW + timedelta(hours=23), Priority.URGENT),
        (NOW + timedelta(days=2), Priority.HIGH),
        (NOW + timedelta(days=6), Priority.MEDIUM),
        (NOW + timedelta(days=8), Priority.LOW),
    ])
    def test_buckets(self, due, expected):
        assert derive_priority(due, now=self.NOW) == expected


@pytest.mark.asyncio
class TestTodoService:
    async def test_today_boundaries(self, db, owner):
        service = TodoService(db)
        day = date(2030, 3, 10)
        for content, due in [
            ("last minute", datetime(2030, 3, 10, 23, 59)),
            ("first minute", datetime(2030, 3, 10, 0, 0)),
            ("next day", datetime(2030, 3, 11, 0, 1)),
            ("day before", datetime(2030, 3, 9, 23, 59)),
        ]:
            await service.create(owner, TodoCreate(content=content, due_date=due))

        todos = await service.list_today(owner, today=day)

        assert sorted(t.content for t in todos) == ["first minute", "last minute"]

    async def test_create_rejects_foreign_category(self, db, owner, stranger):
        category = await CategoryService(db).create(stranger, CategoryCreate(name="Theirs"))

        with pytest.raises(InvalidReference):
            await TodoService(db).create(owner, TodoCreate(content="x", category_id=category.id))

    async def test_toggle_after_concurrent_delete(self, db, owner):
        service = TodoService(db)
        todo = await service.create(owner, TodoCreate(content="race"))
        await TodoRepository(db).soft_delete(todo.id)

        with pytest.raises(NotFound):
            await service.toggle(owner, todo.id)

    async def test_deleted_todo_excluded_from_all_queries(self, db, owner):
        service = TodoService(db)
        todo = await service.create(owner, TodoCreate(content="gone"))
        await service.delete(owner, todo.id)

        assert await service.list_all(owner) == []
        assert await service.list_all(owner, completed=False) == []
        with pytest.raises(NotFound):
            await service.get(owner, todo.id)


@pytest.mark.asyncio
class TestOwnershipGate:
    async def test_owner_gets_record(self, db, owner):
        todo = await TodoService(db).create(owner, TodoCreate(content="mine"))

        loaded = await load_owned(TodoRepository(db), todo.id, owner)

        assert loaded.id == todo.id

    async def test_stranger_is_forbidden(self, db, owner, stranger):
        todo = await TodoService(db).create(owner, TodoCreate(content="mine"))

        with pytest.raises(Forbidden):
            await load_owned(TodoRepository(db), todo.id, stranger)

    async def test_missing_record(self, db, owner):
        with pytest.raises(NotFound):
            await load_owned(CategoryRepository(db), 12345, owner)


@pytest.mark.asyncio
class TestRepositories:
    async def test_update_of_vanished_row_fails(self, db, owner):
        todo = await TodoService(db).create(owner, TodoCreate(content="x"))
        repo = TodoRepository(db)
        await repo.soft_delete(todo.id)

        with pytest.raises(PersistenceFailed):
            await repo.update(todo.id, {"content": "y"})

    async def test_delete_and_detach(self, db, owner):
        category = await CategoryService(db).create(owner, CategoryCreate(name="Work"))
        service = TodoService(db)
        first = await service.create(owner, TodoCreate(content="a", category_id=category.id))
        second = await service.create(owner, TodoCreate(content="b", category_id=category.id))
        await db.commit()

        detached = await CategoryRepository(db).delete_and_detach(category.id)
        await db.commit()

        assert detached == 2
        async with AsyncSessionLocal() as fresh:
            stored = await fresh.get(Category, category.id)
            todos = (await fresh.execute(select(Todo).where(Todo.id.in_([first.id, second.id])))).scalars().all()
        assert stored.is_deleted is True
        assert [t.category_id for t in todos] == [None, None]

    async def test_delete_and_detach_is_all_or_nothing(self, db, owner, monkeypatch):
        category = await CategoryService(db).create(owner, CategoryCreate(name="Work"))
        todo = await TodoService(db).create(owner, TodoCreate(content="a", category_id=category.id))
        await db.commit()
        category_id, todo_id = category.id, todo.id

        original_execute = db.execute
        calls = []

        async def failing_detach(statement, *args, **kwargs):
            calls.append(statement)
            if len(calls) == 2:
                raise SQLAlchemyError("detach failed")
            return await original_execute(statement, *args, **kwargs)

        monkeypatch.setattr(db, "execute", failing_detach)
        with pytest.raises(PersistenceFailed):
            await CategoryRepository(db).delete_and_detach(category_id)
        monkeypatch.undo()
        await db.rollback()

        async with AsyncSessionLocal() as fresh:
            stored_category = await fresh.get(Category, category_id)
            stored_todo = await fresh.get(Todo, todo_id)
        assert stored_category.is_deleted is False
        assert stored_todo.category_id == category_id

    async def test_todo_counts_ignore_deleted(self, db, owner):
        category = await CategoryService(db).create(owner, CategoryCreate(name="Work"))
        service = TodoService(db)
        await service.create(owner, TodoCreate(content="a", category_id=category.id))
        doomed = await service.create(owner, TodoCreate(content="b", category_id=category.id))
        await service.delete(owner, doomed.id)

        counts = await CategoryRepository(db).todo_counts([category.id])

        assert counts == {category.id: 1}
