# workforce/routers/tasks.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from workforce.database import get_db
from workforce.models import TaskStatus
from workforce.queries.task_queries import TaskFilters
from workforce.schemas import MAX_ID, Pagination, TaskCreate, TaskOut, TaskUpdate
from workforce.services import task_service
from workforce.utils.auth import AuthUser, get_current_user
from workforce.utils.permissions import authorize

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_authorized(db: Session, task_id: int, current_user: AuthUser, action: str):
    task = task_service.get_task_by_id(db, task_id)
    authorize(current_user, "task", action, task)
    return task


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    authorize(current_user, "task", "create")

    data = body.model_dump()
    # Unassigned tasks go to whoever created them
    data["assigned_to_user_id"] = data["assigned_to_user_id"] or current_user.id
    data["created_by_user_id"] = current_user.id

    task = task_service.create_task(db, data)
    return {
        "success": True,
        "message": "Task created successfully",
        "data": TaskOut.model_validate(task),
    }


@router.get("")
def list_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1, le=MAX_ID),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    authorize(current_user, "task", "list")

    # Listing is always scoped to the caller's assignments
    filters = TaskFilters(
        status=status_filter,
        assigned_to_user_id=current_user.id,
        limit=limit,
        offset=(page - 1) * limit,
    )
    result = task_service.get_tasks(db, filters)
    return {
        "success": True,
        "message": "Tasks retrieved successfully",
        "data": [TaskOut.model_validate(t) for t in result.data],
        "pagination": Pagination(
            total=result.total,
            page=result.page,
            limit=limit,
            totalPages=result.total_pages,
        ),
    }


@router.get("/{task_id}")
def get_task(
    task_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    task = _load_authorized(db, task_id, current_user, "read")
    return {
        "success": True,
        "message": "Task retrieved successfully",
        "data": TaskOut.model_validate(task),
    }


@router.put("/{task_id}")
def update_task(
    body: TaskUpdate,
    task_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    _load_authorized(db, task_id, current_user, "update")

    task = task_service.update_task(db, task_id, body.model_dump(exclude_unset=True))
    return {
        "success": True,
        "message": "Task updated successfully",
        "data": TaskOut.model_validate(task),
    }


@router.delete("/{task_id}")
def delete_task(
    task_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    _load_authorized(db, task_id, current_user, "delete")

    task_service.delete_task(db, task_id)
    return {"success": True, "message": "Task deleted successfully"}
