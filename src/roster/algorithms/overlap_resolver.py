"""
重複解消アルゴリズム

新しく配置する範囲 [start, end) と重なる既存タスクを、範囲の関係に応じて
削除・切り詰め・分割し、対象従業員のタスク同士が重ならない状態にします。

範囲の関係と処理:
- 重複なし: そのまま保持
- 完全に覆われる: 削除
- 左側で重複: 末尾を切り詰め (end = start)
- 右側で重複: 先頭を切り詰め (start = end)
- 両側にはみ出す: 前後2つに分割
"""

from dataclasses import replace
from enum import Enum
from typing import List, Optional

from ..models.task_models import Task
from ..models.task_store import TaskStore
from ..models.timeline import validate_range
from ..utils.logger import get_logger

logger = get_logger(__name__)


class OverlapRelation(Enum):
    """既存タスクと新しい範囲の関係"""
    NONE = "none"          # 重複なし
    COVERED = "covered"    # 完全に覆われる
    LEFT = "left"          # 既存タスクの末尾が重なる
    RIGHT = "right"        # 既存タスクの先頭が重なる
    STRADDLE = "straddle"  # 新しい範囲が既存タスクの内側にある


def classify_overlap(task_start: int, task_end: int, start: int, end: int) -> OverlapRelation:
    """既存タスク [task_start, task_end) と新しい範囲 [start, end) の関係を判定"""
    if task_end <= start or task_start >= end:
        return OverlapRelation.NONE
    if task_start >= start and task_end <= end:
        return OverlapRelation.COVERED
    if task_start < start and task_end <= end:
        return OverlapRelation.LEFT
    if task_start >= start and task_end > end:
        return OverlapRelation.RIGHT
    return OverlapRelation.STRADDLE


def trim_task(task: Task, start: int, end: int, new_id: Optional[str] = None) -> List[Task]:
    """
    1つのタスクを新しい範囲と重ならないように書き換える

    Args:
        task: 既存タスク
        start: 新しい範囲の開始行
        end: 新しい範囲の終了行
        new_id: 分割時に後半のタスクへ付与するID（分割時は必須）

    Returns:
        書き換え後のタスクのリスト（0〜2件）
    """
    relation = classify_overlap(task.start, task.end, start, end)

    if relation is OverlapRelation.NONE:
        return [task]
    if relation is OverlapRelation.COVERED:
        return []
    if relation is OverlapRelation.LEFT:
        return [replace(task, end=start)]
    if relation is OverlapRelation.RIGHT:
        return [replace(task, start=end)]

    # 分割: 前半は元のIDを引き継ぐ
    if new_id is None:
        raise ValueError(f"タスク {task.id} の分割には新しいIDが必要です")
    return [replace(task, end=start), replace(task, id=new_id, start=end)]


def resolve_overlaps(store: TaskStore, employee_id: str, start: int, end: int,
                     except_id: Optional[str] = None) -> None:
    """
    指定従業員のタスクから範囲 [start, end) との重複を取り除く

    except_id のタスク（ドラッグ中のタスクなど）は対象外です。
    他の従業員のタスクは変更しません。

    Args:
        store: タスクストア
        employee_id: 対象従業員ID
        start: 新しい範囲の開始行
        end: 新しい範囲の終了行
        except_id: 重複解消の対象外とするタスクID

    Raises:
        InvalidRangeError: 範囲が不正な場合（ストアは変更されない）
    """
    validate_range(start, end)

    resolved: List[Task] = []
    changed = False
    for task in store.tasks_by_employee(employee_id):
        if task.id == except_id:
            resolved.append(task)
            continue

        relation = classify_overlap(task.start, task.end, start, end)
        if relation is OverlapRelation.NONE:
            resolved.append(task)
            continue

        new_id = store.next_id() if relation is OverlapRelation.STRADDLE else None
        pieces = trim_task(task, start, end, new_id)
        logger.debug(
            f"重複解消: {task.id} [{task.start}, {task.end}) -> {relation.value} "
            f"{[(t.id, t.start, t.end) for t in pieces]}"
        )
        resolved.extend(pieces)
        changed = True

    if changed:
        store.replace_employee_tasks(employee_id, resolved)
