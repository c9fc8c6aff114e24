"""
隣接タスク結合アルゴリズム

同じ種別・同じラベルで連続するタスクを1つにまとめます。
ツアー系のタスク（一般ツアー・学校プログラム）は個別に編集・削除できるよう、
同一内容で隣接していても結合しません。
"""

from dataclasses import replace
from typing import List

from ..models.task_models import Task
from ..models.task_store import TaskStore
from ..utils.logger import get_logger

logger = get_logger(__name__)


def can_merge(last: Task, task: Task) -> bool:
    """last の直後に task を結合できるかチェック"""
    return (
        last.kind == task.kind
        and last.label == task.label
        and last.end == task.start
        and not last.kind.is_tour_like
        and not task.kind.is_tour_like
    )


def merge_tasks(tasks: List[Task]) -> List[Task]:
    """タスクを開始行順に並べ、結合可能な隣接タスクをまとめたリストを返す"""
    keep: List[Task] = []
    for task in sorted(tasks, key=lambda t: t.start):
        if keep and can_merge(keep[-1], task):
            # 結合後のタスクは前側のIDを引き継ぐ
            keep[-1] = replace(keep[-1], end=task.end)
        else:
            keep.append(task)
    return keep


def merge_adjacent(store: TaskStore, employee_id: str) -> None:
    """
    指定従業員の隣接タスクを結合

    Args:
        store: タスクストア
        employee_id: 対象従業員ID
    """
    tasks = store.tasks_by_employee(employee_id)
    merged = merge_tasks(tasks)
    if len(merged) != len(tasks):
        logger.debug(f"隣接タスク結合: {employee_id} {len(tasks)}件 -> {len(merged)}件")
        store.replace_employee_tasks(employee_id, merged)
