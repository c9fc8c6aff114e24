"""
Roster Timeline

15分単位の1日タイムライン上で、従業員ごとのタスク（作業区間）を
重複なく配置・結合するエンジンを提供します。
"""

from .models import (
    RosterError,
    InvalidRangeError,
    NotFoundError,
    TOTAL_ROWS,
    to_row,
    row_to_time,
    row_range_label,
    parse_shift_hours,
    Task,
    TaskKind,
    Employee,
    TaskStore,
    SequentialIdGenerator,
    EmployeeRoster,
    create_default_roster
)
from .algorithms import (
    OverlapRelation,
    classify_overlap,
    resolve_overlaps,
    merge_adjacent,
    TaskScheduler,
    seed_demo_tasks
)

__version__ = "0.1.0"

__all__ = [
    "RosterError",
    "InvalidRangeError",
    "NotFoundError",
    "TOTAL_ROWS",
    "to_row",
    "row_to_time",
    "row_range_label",
    "parse_shift_hours",
    "Task",
    "TaskKind",
    "Employee",
    "TaskStore",
    "SequentialIdGenerator",
    "EmployeeRoster",
    "create_default_roster",
    "OverlapRelation",
    "classify_overlap",
    "resolve_overlaps",
    "merge_adjacent",
    "TaskScheduler",
    "seed_demo_tasks"
]
