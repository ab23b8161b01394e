from types import SimpleNamespace

import pytest

from workforce.models import UserRole
from workforce.utils.auth import AuthUser
from workforce.utils.errors import AuthorizationError
from workforce.utils.permissions import authorize, is_allowed

ADMIN = AuthUser(id=1, email="admin@company.com", role=UserRole.ADMIN)
EMPLOYEE = AuthUser(id=2, email="employee@company.com", role=UserRole.EMPLOYEE)


def _employee_record(user_id):
    return SimpleNamespace(id=10, user_id=user_id)


def _task(assignee, creator):
    return SimpleNamespace(id=20, assigned_to_user_id=assignee, created_by_user_id=creator)


def test_only_admins_create_and_delete_employees():
    assert is_allowed(ADMIN, "employee", "create")
    assert is_allowed(ADMIN, "employee", "delete")

    with pytest.raises(AuthorizationError, match="Only administrators can create employees"):
        authorize(EMPLOYEE, "employee", "create")
    with pytest.raises(AuthorizationError, match="Only administrators can delete employees"):
        authorize(EMPLOYEE, "employee", "delete")


def test_employee_updates_only_own_record():
    assert is_allowed(ADMIN, "employee", "update", _employee_record(user_id=99))
    assert is_allowed(EMPLOYEE, "employee", "update", _employee_record(user_id=EMPLOYEE.id))

    with pytest.raises(AuthorizationError, match="own employee record"):
        authorize(EMPLOYEE, "employee", "update", _employee_record(user_id=99))


def test_tasks_require_participation_even_for_admins():
    assert is_allowed(EMPLOYEE, "task", "read", _task(assignee=EMPLOYEE.id, creator=ADMIN.id))
    assert is_allowed(EMPLOYEE, "task", "delete", _task(assignee=ADMIN.id, creator=EMPLOYEE.id))
    assert not is_allowed(ADMIN, "task", "update", _task(assignee=EMPLOYEE.id, creator=EMPLOYEE.id))

    with pytest.raises(AuthorizationError) as exc_info:
        authorize(EMPLOYEE, "task", "read", _task(assignee=3, creator=4))
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Forbidden"


def test_unknown_actions_are_denied():
    assert not is_allowed(ADMIN, "payroll", "read")
    with pytest.raises(AuthorizationError):
        authorize(ADMIN, "employee", "archive")
