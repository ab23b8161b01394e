# workforce/models/task.py
import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship
from workforce.database import Base


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        Index("idx_tasks_assigned_status", "assigned_to_user_id", "status"),
        Index("idx_tasks_assigned_priority", "assigned_to_user_id", "priority"),
        Index("idx_tasks_status_priority", "status", "priority"),
        Index("idx_tasks_assigned_status_priority", "assigned_to_user_id", "status", "priority"),
        Index("idx_tasks_due_date", "due_date"),
        Index("idx_tasks_assigned_due", "assigned_to_user_id", "due_date"),
        Index("idx_tasks_created_at", "created_at"),
        Index("idx_tasks_creator_status", "created_by_user_id", "status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Task properties
    status = Column(
        Enum(TaskStatus, name="task_status", values_callable=_enum_values),
        default=TaskStatus.TODO,
        nullable=False,
        index=True,
    )
    priority = Column(
        Enum(TaskPriority, name="task_priority", values_callable=_enum_values),
        default=TaskPriority.MEDIUM,
        nullable=False,
        index=True,
    )

    # Date only, no time component
    due_date = Column(Date, nullable=True)

    # Relationships
    assigned_to_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # System dates
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    creator = relationship("User", foreign_keys=[created_by_user_id], back_populates="created_tasks")
    assignee = relationship("User", foreign_keys=[assigned_to_user_id], back_populates="assigned_tasks")
