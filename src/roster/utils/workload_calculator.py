"""
作業時間集計モジュール

従業員ごと・タスク種別ごとの作業時間（分）を集計します。
"""

import pandas as pd

from ..models.employee_roster import EmployeeRoster
from ..models.task_store import TaskStore
from ..models.timeline import SLOT_MINUTES
from .constants import TASK_KIND_CHOICES


def calc_kind_minutes(roster: EmployeeRoster, store: TaskStore) -> pd.DataFrame:
    """
    従業員別・種別別の作業時間を集計

    Args:
        roster: 従業員ロスター
        store: タスクストア

    Returns:
        作業時間のDataFrame（従業員名を行、種別ラベルを列、最後の列は合計）
    """
    kind_labels = [kind.label for kind in TASK_KIND_CHOICES]
    minutes = pd.DataFrame(
        0,
        index=pd.Index([e.name for e in roster.employees()], name="employee"),
        columns=pd.Index(kind_labels, name="kind")
    )

    for position, employee in enumerate(roster.employees()):
        for task in store.tasks_by_employee(employee.id):
            col = TASK_KIND_CHOICES.index(task.kind)
            minutes.iloc[position, col] += task.length * SLOT_MINUTES

    minutes["total"] = minutes.sum(axis=1)
    return minutes
