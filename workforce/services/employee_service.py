# workforce/services/employee_service.py
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from workforce.models import Employee
from workforce.queries import employee_queries, user_queries
from workforce.services.pagination import DEFAULT_LIMIT, Page, page_number, total_pages
from workforce.utils.errors import ConflictError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _require_valid_id(employee_id: int) -> None:
    if not employee_id or employee_id <= 0:
        raise ValidationError("Valid employee ID is required")


def create_employee(db: Session, data: dict) -> Employee:
    user_id = data.get("user_id")
    logger.debug("Creating employee for user %s", user_id)

    if not user_id or user_id <= 0:
        logger.warning("Employee creation failed: invalid user_id %s", user_id)
        raise ValidationError("Valid user_id is required")

    if not user_queries.user_exists_by_id(db, user_id):
        logger.warning("Employee creation failed: user %s does not exist", user_id)
        raise ValidationError("User does not exist")

    if not (data.get("first_name") or "").strip() or not (data.get("last_name") or "").strip():
        logger.warning("Employee creation failed: missing name for user %s", user_id)
        raise ValidationError("first_name and last_name are required")

    if employee_queries.get_employee_by_user_id(db, user_id) is not None:
        logger.warning("Employee creation failed: user %s already has a record", user_id)
        raise ConflictError("Employee record already exists for this user")

    try:
        employee = employee_queries.create_employee(db, data)
    except IntegrityError:
        db.rollback()
        raise ConflictError("Employee record already exists for this user")
    except SQLAlchemyError:
        db.rollback()
        logger.error("Failed to create employee for user %s", user_id, exc_info=True)
        raise InternalError("Failed to create employee")

    logger.info("Employee created", extra={"employee_id": employee.id, "user_id": user_id})
    return employee


def get_employees(db: Session, limit: int = DEFAULT_LIMIT, offset: int = 0) -> Page[Employee]:
    limit = limit or DEFAULT_LIMIT
    offset = offset or 0

    try:
        rows, total = employee_queries.get_employees(db, limit=limit, offset=offset)
    except SQLAlchemyError:
        logger.error("Failed to fetch employees", exc_info=True)
        raise InternalError("Failed to fetch employees")

    page = page_number(limit, offset)
    logger.info("Fetched %d employees (total %d, page %d)", len(rows), total, page)
    return Page(data=rows, total=total, page=page, total_pages=total_pages(total, limit))


def get_employee_by_id(db: Session, employee_id: int) -> Employee:
    _require_valid_id(employee_id)

    employee = employee_queries.get_employee_by_id(db, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


def update_employee(db: Session, employee_id: int, updates: dict) -> Employee:
    logger.debug("Updating employee %s with %s", employee_id, updates)
    _require_valid_id(employee_id)

    if not updates:
        raise ValidationError("At least one field must be provided for update")

    if not employee_queries.employee_exists(db, employee_id):
        logger.warning("Employee update failed: %s not found", employee_id)
        raise NotFoundError("Employee not found")

    if "user_id" in updates and not user_queries.user_exists_by_id(db, updates["user_id"]):
        logger.warning("Employee update failed: user %s does not exist", updates["user_id"])
        raise ValidationError("User does not exist")

    try:
        updated = employee_queries.update_employee(db, employee_id, updates)
    except IntegrityError:
        db.rollback()
        raise ConflictError("Employee record already exists for this user")

    # Row vanished between the existence check and the write
    if updated is None:
        raise NotFoundError("Employee not found")

    logger.info("Employee updated", extra={"employee_id": employee_id})
    return updated


def delete_employee(db: Session, employee_id: int) -> None:
    logger.debug("Deleting employee %s", employee_id)
    _require_valid_id(employee_id)

    if not employee_queries.employee_exists(db, employee_id):
        logger.warning("Employee deletion failed: %s not found", employee_id)
        raise NotFoundError("Employee not found")

    if not employee_queries.delete_employee(db, employee_id):
        raise NotFoundError("Employee not found")

    logger.info("Employee deleted", extra={"employee_id": employee_id})
