# workforce/routers/employees.py
import logging

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from workforce.database import get_db
from workforce.schemas import EmployeeCreate, EmployeeOut, EmployeeUpdate, MAX_ID, Pagination
from workforce.services import employee_service
from workforce.utils.auth import AuthUser, get_current_user
from workforce.utils.errors import ConflictError, ValidationError
from workforce.utils.permissions import authorize

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeCreate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    authorize(current_user, "employee", "create")

    try:
        employee = employee_service.create_employee(db, body.model_dump())
    except ConflictError as e:
        raise ValidationError(e.message)

    logger.info("Employee %s created by admin %s", employee.id, current_user.id)
    return {
        "success": True,
        "message": "Employee created successfully",
        "data": EmployeeOut.model_validate(employee),
    }


@router.get("")
def list_employees(
    page: int = Query(1, ge=1, le=MAX_ID),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    authorize(current_user, "employee", "list")

    result = employee_service.get_employees(db, limit=limit, offset=(page - 1) * limit)
    return {
        "success": True,
        "message": "Employees retrieved successfully",
        "data": [EmployeeOut.model_validate(e) for e in result.data],
        "pagination": Pagination(
            total=result.total,
            page=result.page,
            limit=limit,
            totalPages=result.total_pages,
        ),
    }


@router.get("/{employee_id}")
def get_employee(
    employee_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    employee = employee_service.get_employee_by_id(db, employee_id)
    authorize(current_user, "employee", "read", employee)
    return {
        "success": True,
        "message": "Employee retrieved successfully",
        "data": EmployeeOut.model_validate(employee),
    }


@router.put("/{employee_id}")
def update_employee(
    body: EmployeeUpdate,
    employee_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    # Admins may edit any record; everyone else only the one linked to them
    existing = employee_service.get_employee_by_id(db, employee_id)
    authorize(current_user, "employee", "update", existing)

    try:
        employee = employee_service.update_employee(db, employee_id, body.model_dump(exclude_unset=True))
    except ConflictError as e:
        raise ValidationError(e.message)

    return {
        "success": True,
        "message": "Employee updated successfully",
        "data": EmployeeOut.model_validate(employee),
    }


@router.delete("/{employee_id}")
def delete_employee(
    employee_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user),
):
    authorize(current_user, "employee", "delete")

    employee_service.delete_employee(db, employee_id)
    logger.info("Employee %s deleted by admin %s", employee_id, current_user.id)
    return {"success": True, "message": "Employee deleted successfully"}
