# workforce/queries/employee_queries.py
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from workforce.models import Employee


def create_employee(db: Session, data: dict) -> Employee:
    now = datetime.utcnow()
    employee = Employee(**data, created_at=now, updated_at=now)
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


def get_employees(db: Session, limit: Optional[int] = None, offset: Optional[int] = None) -> Tuple[List[Employee], int]:
    total = db.query(Employee).count()

    query = db.query(Employee).order_by(Employee.created_at.desc(), Employee.id.desc())
    if limit is not None:
        query = query.limit(limit)
    if offset is not None:
        query = query.offset(offset)

    return query.all(), total


def get_employee_by_id(db: Session, employee_id: int) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_employee_by_user_id(db: Session, user_id: int) -> Optional[Employee]:
    return db.query(Employee).filter(Employee.user_id == user_id).first()


def employee_exists(db: Session, employee_id: int) -> bool:
    return db.query(Employee.id).filter(Employee.id == employee_id).first() is not None


def update_employee(db: Session, employee_id: int, updates: dict) -> Optional[Employee]:
    """Apply updates in one statement; None when no row matched"""
    affected = (
        db.query(Employee)
        .filter(Employee.id == employee_id)
        .update({**updates, "updated_at": datetime.utcnow()}, synchronize_session=False)
    )
    db.commit()
    if not affected:
        return None
    return get_employee_by_id(db, employee_id)


def delete_employee(db: Session, employee_id: int) -> bool:
    affected = db.query(Employee).filter(Employee.id == employee_id).delete(synchronize_session=False)
    db.commit()
    return affected > 0
