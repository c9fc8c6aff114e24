#!/usr/bin/env python3
"""
隣接タスク結合アルゴリズムのユニットテスト

同種・同ラベルの連続タスクの結合と、ツアー系タスクのロックをテストします。
"""

import sys
import os

# srcディレクトリをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from roster.algorithms.compactor import can_merge, merge_tasks, merge_adjacent
from roster.models.task_models import Task, TaskKind
from roster.models.task_store import TaskStore


def add(store, start, end, kind=TaskKind.GALLERY, label=None, employee_id="e_john"):
    task = Task(store.next_id(), employee_id, kind, label or kind.label, start, end)
    store.add_task(task)
    return task


def spans(store, employee_id="e_john"):
    return [(t.start, t.end, t.kind.value) for t in store.tasks_by_employee(employee_id)]


class TestCanMerge:
    """can_mergeのテスト"""

    def test_same_kind_contiguous(self):
        a = Task("t_1", "e_john", TaskKind.GALLERY, "Gallery", 1, 2)
        b = Task("t_2", "e_john", TaskKind.GALLERY, "Gallery", 2, 3)
        assert can_merge(a, b)

    def test_gap(self):
        a = Task("t_1", "e_john", TaskKind.GALLERY, "Gallery", 1, 2)
        b = Task("t_2", "e_john", TaskKind.GALLERY, "Gallery", 3, 4)
        assert not can_merge(a, b)

    def test_different_label(self):
        a = Task("t_1", "e_john", TaskKind.PREP, "Prep", 1, 2)
        b = Task("t_2", "e_john", TaskKind.PREP, "Prep (Room B)", 2, 3)
        assert not can_merge(a, b)

    def test_tour_like_locked(self):
        for kind in (TaskKind.TOUR, TaskKind.SCHOOL_PROGRAM):
            a = Task("t_1", "e_john", kind, kind.label, 1, 2)
            b = Task("t_2", "e_john", kind, kind.label, 2, 3)
            assert not can_merge(a, b)


class TestMergeAdjacent:
    """merge_adjacentのテスト"""

    def test_merge(self):
        """隣接するGalleryタスク [1,2) と [2,3) は [1,3) に結合される"""
        store = TaskStore()
        first = add(store, 1, 2)
        add(store, 2, 3)
        merge_adjacent(store, "e_john")
        tasks = store.tasks_by_employee("e_john")
        assert spans(store) == [(1, 3, "gallery")]
        assert tasks[0].id == first.id

    def test_chain(self):
        store = TaskStore()
        for row in range(4, 9):
            add(store, row, row + 1, TaskKind.FRONT)
        merge_adjacent(store, "e_john")
        assert spans(store) == [(4, 9, "front")]

    def test_tour_lock(self):
        """隣接するツアーは同じラベルでも結合しない"""
        store = TaskStore()
        add(store, 1, 2, TaskKind.TOUR)
        add(store, 2, 3, TaskKind.TOUR)
        merge_adjacent(store, "e_john")
        assert spans(store) == [(1, 2, "tour"), (2, 3, "tour")]

    def test_different_kinds_not_merged(self):
        store = TaskStore()
        add(store, 0, 1, TaskKind.FRONT)
        add(store, 1, 3, TaskKind.GALLERY)
        add(store, 3, 4, TaskKind.BREAK)
        merge_adjacent(store, "e_john")
        assert spans(store) == [(0, 1, "front"), (1, 3, "gallery"), (3, 4, "break")]

    def test_non_tour_around_tour(self):
        store = TaskStore()
        add(store, 0, 1)
        add(store, 1, 2, TaskKind.SCHOOL_PROGRAM)
        add(store, 2, 3)
        merge_adjacent(store, "e_john")
        assert len(store.tasks_by_employee("e_john")) == 3

    def test_other_employees_untouched(self):
        store = TaskStore()
        add(store, 0, 1, employee_id="e_mary")
        add(store, 1, 2, employee_id="e_mary")
        add(store, 0, 1)
        add(store, 1, 2)
        merge_adjacent(store, "e_john")
        assert spans(store) == [(0, 2, "gallery")]
        assert len(store.tasks_by_employee("e_mary")) == 2

    def test_idempotent(self):
        store = TaskStore()
        for row in (0, 1, 3, 4, 6):
            add(store, row, row + 1)
        merge_adjacent(store, "e_john")
        first = store.tasks_by_employee("e_john")
        merge_adjacent(store, "e_john")
        assert store.tasks_by_employee("e_john") == first
        assert spans(store) == [(0, 2, "gallery"), (3, 5, "gallery"), (6, 7, "gallery")]

    def test_merge_tasks_sorts_input(self):
        a = Task("t_1", "e_john", TaskKind.BREAK, "Break", 2, 3)
        b = Task("t_2", "e_john", TaskKind.BREAK, "Break", 1, 2)
        merged = merge_tasks([a, b])
        assert [(t.id, t.start, t.end) for t in merged] == [("t_2", 1, 3)]
