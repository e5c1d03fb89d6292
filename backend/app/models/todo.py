"""待办模型"""
from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from enum import IntEnum

from ..database import Base


class Priority(IntEnum):
    """优先级"""
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    URGENT = 3


class Todo(Base):
    """待办表"""
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    content = Column(Text, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)
    is_deleted = Column(Boolean, nullable=False, default=False)
    priority = Column(Integer, nullable=False, default=int(Priority.MEDIUM))
    due_date = Column(DateTime, nullable=True)  # UTC，不带时区
    created_at = Column(DateTime, default=datetime.utcnow)

    # 关系
    user = relationship("User", back_populates="todos")
    category = relationship("Category", back_populates="todos")
