"""
Database seeding script
Clears users, employees and tasks, then inserts a demo admin, a demo employee,
their employee records and two tasks.

Run after `alembic upgrade head` (or against a local SQLite database).
"""

from datetime import date, timedelta

from sqlalchemy.orm import Session

from workforce import database
from workforce.config import Settings
from workforce.models import Employee, Task, TaskPriority, TaskStatus, User, UserRole
from workforce.services import auth_service

DEMO_ADMIN = {"email": "admin@company.com", "password": "AdminPassword123"}
DEMO_EMPLOYEE = {"email": "employee@company.com", "password": "EmployeePassword123"}


def clear_tables(db: Session):
    """Delete rows in foreign-key-safe order"""
    db.query(Task).delete()
    db.query(Employee).delete()
    db.query(User).delete()
    db.commit()


def seed(db: Session, settings: Settings) -> dict:
    clear_tables(db)

    admin = auth_service.register(db, settings, DEMO_ADMIN["email"], DEMO_ADMIN["password"], role=UserRole.ADMIN)["user"]
    employee = auth_service.register(db, settings, DEMO_EMPLOYEE["email"], DEMO_EMPLOYEE["password"])["user"]

    db.add_all([
        Employee(user_id=admin["id"], first_name="Admin", last_name="User",
                 department="Management", position="Administrator"),
        Employee(user_id=employee["id"], first_name="Employee", last_name="User",
                 department="Operations", position="Staff"),
    ])

    today = date.today()
    db.add_all([
        Task(
            title="Complete onboarding",
            description="Read company policies and complete access setup.",
            status=TaskStatus.TODO,
            priority=TaskPriority.HIGH,
            due_date=today + timedelta(days=7),
            assigned_to_user_id=employee["id"],
            created_by_user_id=admin["id"],
        ),
        Task(
            title="Review monthly report",
            description="Check KPIs and send notes to leadership.",
            status=TaskStatus.IN_PROGRESS,
            priority=TaskPriority.MEDIUM,
            due_date=today + timedelta(days=3),
            assigned_to_user_id=admin["id"],
            created_by_user_id=admin["id"],
        ),
    ])
    db.commit()

    return {"admin": admin, "employee": employee}


def main():
    settings = Settings.from_env()
    database.init_engine(settings.database_url)
    if settings.database_url.startswith("sqlite"):
        database.create_all()

    db = database.SessionLocal()
    try:
        users = seed(db, settings)
    finally:
        db.close()

    print("✅ Seed data created")
    print(f"   Admin:    {DEMO_ADMIN['email']} / {DEMO_ADMIN['password']} (id {users['admin']['id']})")
    print(f"   Employee: {DEMO_EMPLOYEE['email']} / {DEMO_EMPLOYEE['password']} (id {users['employee']['id']})")


if __name__ == "__main__":
    main()
