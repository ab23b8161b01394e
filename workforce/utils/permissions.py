# workforce/utils/permissions.py
"""
Role-based access rules for employees and tasks.

Every rule lives in ``POLICIES`` keyed by ``(resource, action)``. A rule is a
predicate over the caller and, for record-level checks, the record being
touched, plus the message returned when it denies. Routers call
``authorize()`` and never compare roles themselves.
"""

import logging
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from workforce.utils.errors import AuthorizationError

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    allows: Callable[[Any, Any], bool]
    denied_message: str


def _anyone(user, record) -> bool:
    return True


def _admin_only(user, record) -> bool:
    return user.is_admin


def _admin_or_owning_employee(user, record) -> bool:
    return user.is_admin or record.user_id == user.id


def _task_participant(user, record) -> bool:
    # Admins get no blanket access to tasks
    return user.id in (record.assigned_to_user_id, record.created_by_user_id)


POLICIES: Dict[Tuple[str, str], Rule] = {
    ("employee", "create"): Rule(_admin_only, "Forbidden: Only administrators can create employees"),
    ("employee", "list"): Rule(_anyone, "Forbidden"),
    ("employee", "read"): Rule(_anyone, "Forbidden"),
    ("employee", "update"): Rule(_admin_or_owning_employee, "Forbidden: You can only update your own employee record"),
    ("employee", "delete"): Rule(_admin_only, "Forbidden: Only administrators can delete employees"),
    ("task", "create"): Rule(_anyone, "Forbidden"),
    ("task", "list"): Rule(_anyone, "Forbidden"),
    ("task", "read"): Rule(_task_participant, "Forbidden"),
    ("task", "update"): Rule(_task_participant, "Forbidden"),
    ("task", "delete"): Rule(_task_participant, "Forbidden"),
}


def is_allowed(user, resource: str, action: str, record: Optional[Any] = None) -> bool:
    rule = POLICIES.get((resource, action))
    # Unknown pairs are denied
    return rule is not None and rule.allows(user, record)


def authorize(user, resource: str, action: str, record: Optional[Any] = None) -> None:
    """Raise AuthorizationError unless the caller may perform the action"""
    if is_allowed(user, resource, action, record):
        return

    rule = POLICIES.get((resource, action))
    logger.warning(
        "Forbidden: user %s (%s) may not %s %s",
        user.id, user.role.value, action, resource,
        extra={"record_id": getattr(record, "id", None)},
    )
    raise AuthorizationError(rule.denied_message if rule else "Forbidden")
