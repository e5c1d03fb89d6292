"""待办路由"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from ...models import User
from ...schemas import TodoCreate, TodoUpdate, TodoToggle, TodoResponse
from ...services import TodoService
from ..deps import get_current_user, get_todo_service

router = APIRouter()


# ==================== 列表 ====================

@router.get("", response_model=List[TodoResponse])
async def get_todos(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """获取全部待办"""
    return await todos.list_all(current_user, category_id=category_id)


@router.get("/completed", response_model=List[TodoResponse])
async def get_completed_todos(
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """已完成的待办"""
    return await todos.list_all(current_user, completed=True)


@router.get("/pending", response_model=List[TodoResponse])
async def get_pending_todos(
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """未完成的待办"""
    return await todos.list_all(current_user, completed=False)


@router.get("/today", response_model=List[TodoResponse])
async def get_today_todos(
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """今天（UTC）到期的待办"""
    return await todos.list_today(current_user)


# ==================== 单条 ====================

@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_in: TodoCreate,
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """创建待办"""
    return await todos.create(current_user, todo_in)


@router.get("/{todo_id}", response_model=TodoResponse)
async def get_todo(
    todo_id: int,
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """获取单个待办"""
    return await todos.get(current_user, todo_id)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: int,
    todo_in: TodoUpdate,
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """更新待办"""
    return await todos.update(current_user, todo_id, todo_in)


@router.patch("/{todo_id}/toggle", response_model=TodoResponse)
async def toggle_todo(
    todo_id: int,
    toggle_in: Optional[TodoToggle] = None,
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """切换完成状态（可传 isCompleted 指定目标状态）"""
    is_completed = toggle_in.is_completed if toggle_in else None
    return await todos.toggle(current_user, todo_id, is_completed)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int,
    current_user: User = Depends(get_current_user),
    todos: TodoService = Depends(get_todo_service),
):
    """删除待办（软删除）"""
    await todos.delete(current_user, todo_id)
