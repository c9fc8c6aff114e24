#!/usr/bin/env python3
"""
統合テストスイート

ロスター編集の一連の操作（従業員管理・タスク配置・移動・削除・表示用変換）を
シナリオとして検証します。
"""

import sys
import os
import unittest

# srcディレクトリをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import roster
from roster import (
    TaskScheduler, TaskKind, EmployeeRoster, TaskStore, SequentialIdGenerator,
    InvalidRangeError, NotFoundError, RosterError, to_row, parse_shift_hours
)
from roster.utils import convert_store_to_timeline_schedule, calc_kind_minutes


class TestRosterScenario(unittest.TestCase):
    """1日のロスターを組み立てるシナリオ"""

    def setUp(self):
        """テストデータの準備"""
        self.roster = EmployeeRoster()
        self.store = TaskStore(id_factory=SequentialIdGenerator(prefix="task-"))
        self.scheduler = TaskScheduler(self.roster, self.store)

        start, end = parse_shift_hours("09:30-16:00")
        self.anna = self.roster.add_employee("Anna", start, end)
        start, end = parse_shift_hours("10:00-14:00")
        self.ben = self.roster.add_employee("Ben", start, end)

    def _spans(self, employee_id):
        return [(t.start, t.end, t.label) for t in self.scheduler.tasks_by_employee(employee_id)]

    def test_build_day(self):
        """受付→展示室→ツアー→休憩の1日を組み立てる"""
        for row in range(to_row("09:30"), to_row("10:30")):
            self.scheduler.place_task(self.anna.id, row, TaskKind.FRONT)
        for row in range(to_row("10:30"), to_row("12:00")):
            self.scheduler.place_task(self.anna.id, row, TaskKind.GALLERY)
        tour_a = self.scheduler.place_task(self.anna.id, to_row("11:00"), TaskKind.TOUR)
        tour_b = self.scheduler.place_task(self.anna.id, to_row("11:15"), TaskKind.TOUR)
        self.scheduler.place_task(self.anna.id, to_row("12:00"), TaskKind.BREAK)

        self.assertEqual(self._spans(self.anna.id), [
            (0, 4, "Front Desk"),
            (4, 6, "Gallery"),
            (6, 7, "Public Tour"),
            (7, 8, "Public Tour"),
            (8, 10, "Gallery"),
            (10, 11, "Break"),
        ])
        self.assertNotEqual(tour_a.id, tour_b.id)
        self.assertTrue(all(t.id.startswith("task-") for t in self.store.all_tasks()))

        # ツアーを1つ削除しても、もう1つは残る
        self.scheduler.remove_task(tour_a.id)
        self.assertIn((7, 8, "Public Tour"), self._spans(self.anna.id))
        self.assertNotIn((6, 7, "Public Tour"), self._spans(self.anna.id))

        # 空いた枠を展示室で埋めると前後の展示室と結合される
        merged = self.scheduler.place_task(self.anna.id, 6, TaskKind.GALLERY)
        self.assertEqual((merged.start, merged.end), (4, 7))

    def test_employees_are_independent(self):
        """他の従業員のタスクには影響しない"""
        self.scheduler.place_task(self.anna.id, 3, TaskKind.PREP)
        self.scheduler.place_task(self.ben.id, 3, TaskKind.TIDY)
        self.assertEqual(self._spans(self.anna.id), [(3, 4, "Prep")])
        self.assertEqual(self._spans(self.ben.id), [(3, 4, "Finish")])

    def test_errors_leave_store_unchanged(self):
        self.scheduler.place_task(self.anna.id, 0, TaskKind.FRONT)
        before = self.store.all_tasks()

        with self.assertRaises(InvalidRangeError):
            self.scheduler.place_task(self.anna.id, 26, TaskKind.FRONT)
        with self.assertRaises(NotFoundError):
            self.scheduler.place_task("e_ghost", 0, TaskKind.FRONT)
        with self.assertRaises(RosterError):
            self.scheduler.move_task("task-999", 0, 2)

        self.assertEqual(self.store.all_tasks(), before)

    def test_shift_bounds_are_exposed_not_enforced(self):
        """勤務時間外への配置は呼び出し側の判断に委ねる"""
        task = self.scheduler.place_task(self.ben.id, 0, TaskKind.FRONT)
        self.assertFalse(self.ben.covers(task.start, task.end))
        self.assertTrue(self.ben.covers(2, 3))

    def test_views(self):
        self.scheduler.place_task(self.ben.id, 2, TaskKind.SCHOOL_PRE)
        self.scheduler.place_task(self.ben.id, 3, TaskKind.SCHOOL_PROGRAM)
        self.scheduler.place_task(self.ben.id, 4, TaskKind.SCHOOL_PROGRAM)

        schedule = convert_store_to_timeline_schedule(self.roster, self.store)
        self.assertEqual(schedule.loc["Ben", "10:00"], "School Pre")
        self.assertEqual(schedule.loc["Ben", "10:30"], "School Program")

        minutes = calc_kind_minutes(self.roster, self.store)
        self.assertEqual(minutes.loc["Ben", "School Program"], 30)
        self.assertEqual(minutes.loc["Ben", "total"], 45)
        self.assertEqual(len(self.scheduler.tasks_by_employee(self.ben.id)), 3)

    def test_remove_employee(self):
        self.scheduler.place_task(self.ben.id, 2, TaskKind.FRONT)
        self.scheduler.remove_employee(self.ben.id)
        self.assertEqual(len(self.roster), 1)
        self.assertEqual(self.store.all_tasks(), [])


class TestPublicApi(unittest.TestCase):
    """パッケージの公開APIのテスト"""

    def test_exports(self):
        for name in roster.__all__:
            self.assertTrue(hasattr(roster, name), name)

    def test_time_helpers(self):
        self.assertEqual(roster.row_range_label(0, 2), "09:30-10:00")
        self.assertEqual(roster.TOTAL_ROWS, 26)


if __name__ == "__main__":
    unittest.main()
