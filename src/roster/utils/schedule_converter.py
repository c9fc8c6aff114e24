"""
スケジュール変換モジュール

タスクストアの内容を表示用のDataFrameに変換する機能を提供します。
"""

import pandas as pd
from typing import Iterable

from ..models.employee_roster import EmployeeRoster
from ..models.task_models import Task
from ..models.task_store import TaskStore
from .constants import TASK_TABLE_COLUMNS, TIME_COLUMNS, EMPTY_CELL, OFF_SHIFT_CELL


def convert_tasks_to_dataframe(tasks: Iterable[Task]) -> pd.DataFrame:
    """
    タスクの一覧を1行1タスクのDataFrameに変換

    Args:
        tasks: タスクのリスト

    Returns:
        タスク一覧のDataFrame（列: id, employee_id, kind, label, start, end, time_range）
    """
    rows = [
        {
            "id": task.id,
            "employee_id": task.employee_id,
            "kind": task.kind.value,
            "label": task.label,
            "start": task.start,
            "end": task.end,
            "time_range": task.time_range
        }
        for task in tasks
    ]
    return pd.DataFrame(rows, columns=TASK_TABLE_COLUMNS)


def convert_store_to_timeline_schedule(roster: EmployeeRoster, store: TaskStore,
                                       mark_off_shift: bool = False) -> pd.DataFrame:
    """
    タスクストアを従業員別タイムライン表に変換

    Args:
        roster: 従業員ロスター
        store: タスクストア
        mark_off_shift: 勤務時間外の空きセルを記号で表示するか

    Returns:
        従業員別タイムライン表（従業員名を行、時刻を列、セルはタスクのラベル）
    """
    employees = roster.employees()

    schedule = pd.DataFrame(
        EMPTY_CELL,
        index=pd.Index([e.name for e in employees], name="employee"),
        columns=pd.Index(TIME_COLUMNS, name="time")
    )

    for position, employee in enumerate(employees):
        if mark_off_shift:
            for row in range(len(TIME_COLUMNS)):
                if not employee.covers(row, row + 1):
                    schedule.iloc[position, row] = OFF_SHIFT_CELL

        for task in store.tasks_by_employee(employee.id):
            schedule.iloc[position, task.start:task.end] = task.label

    return schedule


def convert_store_to_kind_grid(roster: EmployeeRoster, store: TaskStore) -> pd.DataFrame:
    """
    タスクストアを種別コードの表に変換（色付け表示用）

    Returns:
        従業員名を行、時刻を列、セルはタスク種別の値（空きは ""）
    """
    employees = roster.employees()
    grid = pd.DataFrame(
        EMPTY_CELL,
        index=pd.Index([e.name for e in employees], name="employee"),
        columns=pd.Index(TIME_COLUMNS, name="time")
    )
    for position, employee in enumerate(employees):
        for task in store.tasks_by_employee(employee.id):
            grid.iloc[position, task.start:task.end] = task.kind.value
    return grid
