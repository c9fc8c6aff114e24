"""
モデル層

タイムライン、タスク、従業員ロスター、タスクストアのデータ構造を提供します。
"""

from .exceptions import RosterError, InvalidRangeError, NotFoundError
from .timeline import (
    DAY_START_MIN,
    SLOT_MINUTES,
    TOTAL_ROWS,
    to_row,
    row_to_time,
    row_range_label,
    validate_row,
    validate_range,
    parse_shift_hours
)
from .task_models import Task, TaskKind, Employee, TASK_LABELS, TASK_COLORS
from .task_store import TaskStore, SequentialIdGenerator
from .employee_roster import EmployeeRoster, create_default_roster

__all__ = [
    "RosterError",
    "InvalidRangeError",
    "NotFoundError",
    "DAY_START_MIN",
    "SLOT_MINUTES",
    "TOTAL_ROWS",
    "to_row",
    "row_to_time",
    "row_range_label",
    "validate_row",
    "validate_range",
    "parse_shift_hours",
    "Task",
    "TaskKind",
    "Employee",
    "TASK_LABELS",
    "TASK_COLORS",
    "TaskStore",
    "SequentialIdGenerator",
    "EmployeeRoster",
    "create_default_roster"
]
