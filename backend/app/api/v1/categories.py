"""分类路由"""
from fastapi import APIRouter, Depends, status
from typing import List

from ...models import User
from ...schemas import CategoryCreate, CategoryUpdate, CategoryResponse
from ...services import CategoryService
from ..deps import get_current_user, get_category_service

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def get_categories(
    current_user: User = Depends(get_current_user),
    categories: CategoryService = Depends(get_category_service),
):
    """获取分类列表（含待办数量）"""
    return await categories.list_all(current_user)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_in: CategoryCreate,
    current_user: User = Depends(get_current_user),
    categories: CategoryService = Depends(get_category_service),
):
    """创建分类"""
    return await categories.create(current_user, category_in)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    categories: CategoryService = Depends(get_category_service),
):
    """获取单个分类"""
    return await categories.get(current_user, category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category_in: CategoryUpdate,
    current_user: User = Depends(get_current_user),
    categories: CategoryService = Depends(get_category_service),
):
    """更新分类"""
    return await categories.update(current_user, category_id, category_in)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    categories: CategoryService = Depends(get_category_service),
):
    """删除分类，其下待办解除关联"""
    await categories.delete(current_user, category_id)
