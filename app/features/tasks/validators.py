"""Validation rule sets for Task endpoints"""

from app.features.tasks.domain import TaskPriority, TaskStatus
from app.middleware.validation import (
    PATH,
    FieldRule,
    escape,
    is_in,
    is_iso_datetime,
    is_string,
    is_uuid,
    not_empty,
    trim,
)

_STATUS_RULE = FieldRule("status", (is_in(TaskStatus, "Invalid task status"),), optional=True)
_PRIORITY_RULE = FieldRule("priority", (is_in(TaskPriority, "Invalid task priority"),), optional=True)

_ASSIGNMENT_RULES = (
    FieldRule(
        "assignedToName",
        (is_string("Assignee name must be a string"), trim, escape),
        optional=True,
        nullable=True,
    ),
    FieldRule(
        "assignedToAvatar",
        (is_string("Assignee avatar must be a string"), trim),
        optional=True,
        nullable=True,
    ),
    FieldRule("dueDate", (is_iso_datetime("Invalid due date"),), optional=True, nullable=True),
)

CREATE_TASK_RULES = (
    FieldRule("name", (trim, not_empty("Task name is required"), escape)),
    FieldRule(
        "description",
        (is_string("Task description must be a string"), trim, escape),
        optional=True,
        nullable=True,
    ),
    _STATUS_RULE,
    _PRIORITY_RULE,
    *_ASSIGNMENT_RULES,
)

# Same as create, but every field is optional and description may be empty
UPDATE_TASK_RULES = (
    FieldRule("name", (trim, not_empty("Task name cannot be empty"), escape), optional=True),
    FieldRule(
        "description",
        (is_string("Task description must be a string"), trim, escape),
        optional=True,
        nullable=True,
    ),
    _STATUS_RULE,
    _PRIORITY_RULE,
    *_ASSIGNMENT_RULES,
)

TASK_ID_RULES = (
    FieldRule("task_id", (is_uuid("Invalid task ID format"),), location=PATH, label="id"),
)
