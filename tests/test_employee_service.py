"""
Tests for workforce/services/employee_service.py
"""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from workforce.models import Employee, User
from workforce.services import employee_service
from workforce.utils.errors import ConflictError, InternalError, NotFoundError, ValidationError


def _employee_data(user_id, **overrides):
    data = {"user_id": user_id, "first_name": "Jane", "last_name": "Smith", "department": "IT", "position": "Dev"}
    data.update(overrides)
    return data


class TestCreateEmployee:
    def test_creates_employee(self, db, employee_user):
        employee = employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))

        assert employee.id is not None
        assert employee.user_id == employee_user["user"]["id"]
        assert employee.created_at is not None
        assert employee.updated_at is not None

    def test_rejects_missing_user_id(self, db):
        with pytest.raises(ValidationError, match="Valid user_id is required"):
            employee_service.create_employee(db, _employee_data(0))

    def test_rejects_unknown_user(self, db):
        with pytest.raises(ValidationError, match="User does not exist"):
            employee_service.create_employee(db, _employee_data(9999))

    def test_rejects_blank_names(self, db, employee_user):
        user_id = employee_user["user"]["id"]
        with pytest.raises(ValidationError, match="first_name and last_name are required"):
            employee_service.create_employee(db, _employee_data(user_id, first_name="  "))
        with pytest.raises(ValidationError, match="first_name and last_name are required"):
            employee_service.create_employee(db, _employee_data(user_id, last_name=""))

    def test_one_employee_per_user(self, db, employee_user):
        user_id = employee_user["user"]["id"]
        employee_service.create_employee(db, _employee_data(user_id))
        with pytest.raises(ConflictError):
            employee_service.create_employee(db, _employee_data(user_id, first_name="Again"))

    def test_wraps_database_errors(self, db, employee_user):
        with patch(
            "workforce.queries.employee_queries.create_employee",
            side_effect=OperationalError("INSERT", {}, Exception("db down")),
        ):
            with pytest.raises(InternalError) as exc_info:
                employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))
        assert exc_info.value.message == "Failed to create employee"


class TestListEmployees:
    def test_paginates_newest_first(self, db, make_user):
        ids = []
        for i in range(5):
            user = make_user()
            ids.append(employee_service.create_employee(db, _employee_data(user["user"]["id"], first_name=f"E{i}")).id)

        page = employee_service.get_employees(db, limit=2, offset=2)

        assert page.total == 5
        assert page.page == 2
        assert page.total_pages == 3
        assert [e.id for e in page.data] == list(reversed(ids))[2:4]

    def test_empty_table(self, db):
        page = employee_service.get_employees(db)
        assert page.data == []
        assert page.total == 0
        assert page.page == 1
        assert page.total_pages == 0


class TestGetEmployee:
    def test_rejects_invalid_id(self, db):
        with pytest.raises(ValidationError):
            employee_service.get_employee_by_id(db, 0)

    def test_not_found(self, db):
        with pytest.raises(NotFoundError, match="Employee not found"):
            employee_service.get_employee_by_id(db, 123)


class TestUpdateEmployee:
    def test_merges_fields(self, db, employee_user):
        employee = employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))

        updated = employee_service.update_employee(db, employee.id, {"last_name": "Updated"})

        assert updated.last_name == "Updated"
        assert updated.first_name == "Jane"
        assert updated.updated_at >= employee.created_at

    def test_not_found(self, db):
        with pytest.raises(NotFoundError):
            employee_service.update_employee(db, 42, {"last_name": "X"})

    def test_rejects_empty_update(self, db, employee_user):
        employee = employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))
        with pytest.raises(ValidationError):
            employee_service.update_employee(db, employee.id, {})

    def test_rejects_unknown_user_id(self, db, employee_user):
        employee = employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))
        with pytest.raises(ValidationError, match="User does not exist"):
            employee_service.update_employee(db, employee.id, {"user_id": 9999})

    def test_row_vanishing_mid_update_is_not_found(self, db, employee_user):
        employee = employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))
        with patch("workforce.queries.employee_queries.update_employee", return_value=None):
            with pytest.raises(NotFoundError):
                employee_service.update_employee(db, employee.id, {"last_name": "X"})


class TestDeleteEmployee:
    def test_delete_then_delete_again(self, db, employee_user):
        employee = employee_service.create_employee(db, _employee_data(employee_user["user"]["id"]))

        employee_service.delete_employee(db, employee.id)

        with pytest.raises(NotFoundError, match="Employee not found"):
            employee_service.delete_employee(db, employee.id)

    def test_deleting_user_cascades_to_employee(self, db, employee_user):
        user_id = employee_user["user"]["id"]
        employee = employee_service.create_employee(db, _employee_data(user_id))

        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()

        assert db.query(Employee).filter(Employee.id == employee.id).first() is None
