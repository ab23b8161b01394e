# workforce/queries/task_queries.py
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from workforce.models import Task, TaskStatus


@dataclass
class TaskFilters:
    status: Optional[TaskStatus] = None
    assigned_to_user_id: Optional[int] = None
    created_by_user_id: Optional[int] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


def create_task(db: Session, data: dict) -> Task:
    now = datetime.utcnow()
    task = Task(**data, created_at=now, updated_at=now)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def get_tasks(db: Session, filters: TaskFilters) -> Tuple[List[Task], int]:
    query = db.query(Task)

    if filters.status:
        query = query.filter(Task.status == filters.status)
    if filters.assigned_to_user_id:
        query = query.filter(Task.assigned_to_user_id == filters.assigned_to_user_id)
    if filters.created_by_user_id:
        query = query.filter(Task.created_by_user_id == filters.created_by_user_id)

    total = query.count()

    query = query.order_by(Task.created_at.desc(), Task.id.desc())
    if filters.limit:
        query = query.limit(filters.limit)
    if filters.offset:
        query = query.offset(filters.offset)

    return query.all(), total


def get_task_by_id(db: Session, task_id: int) -> Optional[Task]:
    return db.query(Task).filter(Task.id == task_id).first()


def task_exists(db: Session, task_id: int) -> bool:
    return db.query(Task.id).filter(Task.id == task_id).first() is not None


def update_task(db: Session, task_id: int, updates: dict) -> Optional[Task]:
    """Apply updates in one statement; None when no row matched"""
    affected = (
        db.query(Task)
        .filter(Task.id == task_id)
        .update({**updates, "updated_at": datetime.utcnow()}, synchronize_session=False)
    )
    db.commit()
    if not affected:
        return None
    return get_task_by_id(db, task_id)


def delete_task(db: Session, task_id: int) -> bool:
    affected = db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
    db.commit()
    return affected > 0
