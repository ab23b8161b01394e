# workforce/services/task_service.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from workforce.models import Task, TaskPriority, TaskStatus
from workforce.queries import task_queries, user_queries
from workforce.queries.task_queries import TaskFilters
from workforce.services.pagination import DEFAULT_LIMIT, Page, page_number, total_pages
from workforce.utils.errors import InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

VALID_STATUSES = [s.value for s in TaskStatus]
VALID_PRIORITIES = [p.value for p in TaskPriority]


def _require_valid_id(task_id: int) -> None:
    if not task_id or task_id <= 0:
        raise ValidationError("Valid task ID is required")


def _check_enums(status: Optional[str], priority: Optional[str]) -> None:
    if status is not None and status not in VALID_STATUSES:
        raise ValidationError(f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}")
    if priority is not None and priority not in VALID_PRIORITIES:
        raise ValidationError(f"Invalid priority. Must be one of: {', '.join(VALID_PRIORITIES)}")


def create_task(db: Session, data: dict) -> Task:
    logger.debug("Creating task %r", data.get("title"))

    if not (data.get("title") or "").strip():
        raise ValidationError("title is required")

    _check_enums(data.get("status"), data.get("priority"))

    assignee = data.get("assigned_to_user_id")
    if not assignee or assignee <= 0:
        raise ValidationError("Valid assigned_to_user_id is required")
    if not user_queries.user_exists_by_id(db, assignee):
        logger.warning("Task creation failed: assignee %s does not exist", assignee)
        raise ValidationError("Assigned user does not exist")

    creator = data.get("created_by_user_id")
    if not creator or creator <= 0:
        raise ValidationError("Valid created_by_user_id is required")
    # Tokens outlive deleted accounts
    if not user_queries.user_exists_by_id(db, creator):
        logger.warning("Task creation failed: creator %s does not exist", creator)
        raise ValidationError("Creating user does not exist")

    try:
        task = task_queries.create_task(db, data)
    except IntegrityError:
        db.rollback()
        logger.warning("Task creation failed: referenced user vanished", exc_info=True)
        raise ValidationError("Assigned or creating user does not exist")
    except SQLAlchemyError:
        db.rollback()
        logger.error("Failed to create task %r", data.get("title"), exc_info=True)
        raise InternalError("Failed to create task")

    logger.info("Task created", extra={"task_id": task.id, "created_by": creator})
    return task


def get_tasks(db: Session, filters: Optional[TaskFilters] = None) -> Page[Task]:
    filters = filters or TaskFilters()
    filters.limit = filters.limit or DEFAULT_LIMIT
    filters.offset = filters.offset or 0

    try:
        rows, total = task_queries.get_tasks(db, filters)
    except SQLAlchemyError:
        logger.error("Failed to fetch tasks", exc_info=True)
        raise InternalError("Failed to fetch tasks")

    page = page_number(filters.limit, filters.offset)
    return Page(data=rows, total=total, page=page, total_pages=total_pages(total, filters.limit))


def get_task_by_id(db: Session, task_id: int) -> Task:
    _require_valid_id(task_id)

    task = task_queries.get_task_by_id(db, task_id)
    if task is None:
        logger.warning("Task %s not found", task_id)
        raise NotFoundError("Task not found")
    return task


def update_task(db: Session, task_id: int, updates: dict) -> Task:
    logger.debug("Updating task %s with %s", task_id, updates)
    _require_valid_id(task_id)

    if not updates:
        raise ValidationError("At least one field must be provided for update")

    if not task_queries.task_exists(db, task_id):
        raise NotFoundError("Task not found")

    _check_enums(updates.get("status"), updates.get("priority"))

    if "assigned_to_user_id" in updates and not user_queries.user_exists_by_id(db, updates["assigned_to_user_id"]):
        logger.warning("Task update failed: assignee %s does not exist", updates["assigned_to_user_id"])
        raise ValidationError("Assigned user does not exist")

    updated = task_queries.update_task(db, task_id, updates)
    if updated is None:
        raise NotFoundError("Task not found")

    logger.info("Task updated", extra={"task_id": task_id})
    return updated


def delete_task(db: Session, task_id: int) -> None:
    _require_valid_id(task_id)

    if not task_queries.task_exists(db, task_id):
        raise NotFoundError("Task not found")

    if not task_queries.delete_task(db, task_id):
        raise NotFoundError("Task not found")

    logger.info("Task deleted", extra={"task_id": task_id})
