"""
アルゴリズム層

重複解消・隣接タスク結合と、それらを組み合わせたスケジューラーを提供します。
"""

from .overlap_resolver import OverlapRelation, classify_overlap, trim_task, resolve_overlaps
from .compactor import can_merge, merge_tasks, merge_adjacent
from .task_scheduler import TaskScheduler, seed_demo_tasks

__all__ = [
    "OverlapRelation",
    "classify_overlap",
    "trim_task",
    "resolve_overlaps",
    "can_merge",
    "merge_tasks",
    "merge_adjacent",
    "TaskScheduler",
    "seed_demo_tasks"
]
