"""分类模型"""
from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship
from datetime import datetime

from ..database import Base

DEFAULT_CATEGORY_COLOR = "#3B82F6"


class Category(Base):
    """分类表"""
    __tablename__ = "categories"
    __table_args__ = (
        Index("ix_categories_user_id_is_deleted", "user_id", "is_deleted"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(50), nullable=False)
    color = Column(String(7), nullable=False, default=DEFAULT_CATEGORY_COLOR)
    icon = Column(String(50), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # 关系
    user = relationship("User", back_populates="categories")
    todos = relationship("Todo", back_populates="category", passive_deletes=True)
