"""Add composite indexes

Revision ID: 20260114_04
Revises: 20260114_03
Create Date: 2026-01-14

"""

from __future__ import annotations

from alembic import op


# revision identifiers, used by Alembic.
revision = "20260114_04"
down_revision = "20260114_03"
branch_labels = None
depends_on = None

INDEXES = [
    # Authentication and role lookups
    ("idx_users_email_role", "users", ["email", "role"]),
    ("idx_users_created_at", "users", ["created_at"]),
    # Employee search and sorting
    ("idx_employees_user_dept", "employees", ["user_id", "department"]),
    ("idx_employees_dept_position", "employees", ["department", "position"]),
    ("idx_employees_name", "employees", ["last_name", "first_name"]),
    ("idx_employees_created_at", "employees", ["created_at"]),
    # Task filters, due dates and pagination
    ("idx_tasks_assigned_status", "tasks", ["assigned_to_user_id", "status"]),
    ("idx_tasks_assigned_priority", "tasks", ["assigned_to_user_id", "priority"]),
    ("idx_tasks_status_priority", "tasks", ["status", "priority"]),
    ("idx_tasks_assigned_status_priority", "tasks", ["assigned_to_user_id", "status", "priority"]),
    ("idx_tasks_due_date", "tasks", ["due_date"]),
    ("idx_tasks_assigned_due", "tasks", ["assigned_to_user_id", "due_date"]),
    ("idx_tasks_created_at", "tasks", ["created_at"]),
    ("idx_tasks_creator_status", "tasks", ["created_by_user_id", "status"]),
]


def upgrade() -> None:
    for name, table, columns in INDEXES:
        op.create_index(name, table, columns, unique=False)


def downgrade() -> None:
    for name, table, _ in reversed(INDEXES):
        op.drop_index(name, table_name=table)
