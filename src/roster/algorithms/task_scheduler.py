"""
タスクスケジューラー

プレゼンテーション層から呼び出される公開操作（タスク配置・移動・削除）を提供します。
各操作は 重複解消 → タスク追加 → 隣接タスク結合 の順に実行され、
戻り時には常に結合済みの状態になります。
入力が不正な場合は例外を送出し、ストアは変更しません。
"""

import logging
from dataclasses import replace
from typing import List, Optional

from ..models.employee_roster import EmployeeRoster
from ..models.exceptions import NotFoundError
from ..models.task_models import Employee, Task, TaskKind
from ..models.task_store import TaskStore
from ..models.timeline import validate_range, validate_row
from ..utils.logger import get_logger, log_extra_fields
from .compactor import merge_adjacent
from .overlap_resolver import resolve_overlaps

logger = get_logger(__name__)


class TaskScheduler:
    """従業員ロスターとタスクストアをまとめて操作するスケジューラー"""

    def __init__(self, roster: EmployeeRoster, store: Optional[TaskStore] = None):
        """
        初期化

        Args:
            roster: 従業員ロスター
            store: タスクストア（Noneの場合は新規作成）
        """
        self.roster = roster
        self.store = store if store is not None else TaskStore()

    def place_task(self, employee_id: str, row: int, kind: TaskKind) -> Task:
        """
        1行分のタスクを配置

        Args:
            employee_id: 従業員ID
            row: 配置する行
            kind: タスク種別

        Returns:
            配置後に row を含むタスク（隣接タスクと結合された場合は結合後のタスク）

        Raises:
            InvalidRangeError: row が範囲外の場合
            NotFoundError: 従業員が存在しない場合
        """
        validate_row(row)
        self._require_employee(employee_id)
        kind = TaskKind(kind)

        new_task = Task(
            id=self.store.next_id(),
            employee_id=employee_id,
            kind=kind,
            label=kind.label,
            start=row,
            end=row + 1
        )
        resolve_overlaps(self.store, employee_id, new_task.start, new_task.end)
        self.store.add_task(new_task)
        if not kind.is_tour_like:
            merge_adjacent(self.store, employee_id)

        placed = self._task_at(employee_id, row)
        log_extra_fields(logger, logging.INFO, "タスクを配置しました",
                         employee_id=employee_id, kind=kind.value, task_id=placed.id, time_range=placed.time_range)
        return placed

    def move_task(self, task_id: str, start: int, end: int) -> Task:
        """
        既存タスクを新しい範囲 [start, end) に移動（ドラッグ・リサイズ）

        Returns:
            移動後に start を含むタスク
        """
        validate_range(start, end)
        task = self.store.get_task(task_id)

        resolve_overlaps(self.store, task.employee_id, start, end, except_id=task_id)
        self.store.remove_task(task_id)
        self.store.add_task(replace(task, start=start, end=end))
        if not task.kind.is_tour_like:
            merge_adjacent(self.store, task.employee_id)

        moved = self._task_at(task.employee_id, start)
        log_extra_fields(logger, logging.INFO, "タスクを移動しました",
                         task_id=task_id, before=task.time_range, after=moved.time_range)
        return moved

    def relabel_task(self, task_id: str, label: str) -> Task:
        """タスクのラベルを変更"""
        if not label or not label.strip():
            raise ValueError("ラベルは必須です")
        task = self.store.get_task(task_id)

        self.store.remove_task(task_id)
        self.store.add_task(replace(task, label=label.strip()))
        if not task.kind.is_tour_like:
            merge_adjacent(self.store, task.employee_id)
        return self._task_at(task.employee_id, task.start)

    def remove_task(self, task_id: str) -> Task:
        """タスクを削除して返す"""
        task = self.store.remove_task(task_id)
        log_extra_fields(logger, logging.INFO, "タスクを削除しました",
                         task_id=task.id, label=task.label, time_range=task.time_range)
        return task

    def remove_employee(self, employee_id: str) -> Employee:
        """従業員をロスターから削除し、その従業員のタスクもすべて削除"""
        employee = self.roster.remove_employee(employee_id)
        removed = self.store.clear_employee(employee_id)
        logger.info(f"従業員を削除しました: {employee.name} (タスク {len(removed)}件)")
        return employee

    def tasks_by_employee(self, employee_id: str) -> List[Task]:
        """指定従業員のタスクを開始行の昇順で取得"""
        return self.store.tasks_by_employee(employee_id)

    def resolve_overlaps(self, employee_id: str, start: int, end: int,
                         except_id: Optional[str] = None) -> None:
        """重複解消を直接実行"""
        resolve_overlaps(self.store, employee_id, start, end, except_id)

    def merge_adjacent(self, employee_id: str) -> None:
        """隣接タスク結合を直接実行"""
        merge_adjacent(self.store, employee_id)

    def _require_employee(self, employee_id: str) -> Employee:
        if employee_id not in self.roster:
            raise NotFoundError(f"従業員が見つかりません: {employee_id}")
        return self.roster.get_employee(employee_id)

    def _task_at(self, employee_id: str, row: int) -> Task:
        for task in self.store.tasks_by_employee(employee_id):
            if task.start <= row < task.end:
                return task
        raise NotFoundError(f"行 {row} にタスクがありません: {employee_id}")


def seed_demo_tasks(scheduler: TaskScheduler, employee_id: str = "e_john") -> List[Task]:
    """デモ用のタスク（受付 1行・展示室 2行）を配置"""
    scheduler.place_task(employee_id, 0, TaskKind.FRONT)
    scheduler.place_task(employee_id, 1, TaskKind.GALLERY)
    scheduler.place_task(employee_id, 2, TaskKind.GALLERY)
    return scheduler.tasks_by_employee(employee_id)
