"""
タスクストア

従業員ごとのタスク一覧を保持します。各従業員のタスクは開始行の昇順で保持され、
エンジン実行後は互いに重複しないことが保証されます。
"""

import itertools
from typing import Callable, Dict, Iterator, List, Optional

from .exceptions import NotFoundError
from .task_models import Task

MAX_ID_RETRIES = 100


class SequentialIdGenerator:
    """"t_1", "t_2", ... を払い出す単調増加IDジェネレータ"""

    def __init__(self, prefix: str = "t_", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


class TaskStore:
    """従業員ID → タスク一覧 のマッピングを所有するストア"""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        """
        初期化

        Args:
            id_factory: タスクIDを生成する関数（Noneの場合は連番）
        """
        self._id_factory = id_factory or SequentialIdGenerator()
        self._tasks: Dict[str, List[Task]] = {}

    def __len__(self) -> int:
        return sum(len(tasks) for tasks in self._tasks.values())

    def __iter__(self) -> Iterator[Task]:
        return iter(self.all_tasks())

    def next_id(self) -> str:
        """新しいタスクIDを払い出す"""
        # 既存IDとは衝突させない
        for _ in range(MAX_ID_RETRIES):
            task_id = self._id_factory()
            if self._find(task_id) is None:
                return task_id
        raise ValueError(f"未使用のタスクIDを生成できません（最後に生成されたID: {task_id}）")

    def employee_ids(self) -> List[str]:
        """タスクを持つ従業員IDの一覧"""
        return [emp_id for emp_id, tasks in self._tasks.items() if tasks]

    def tasks_by_employee(self, employee_id: str) -> List[Task]:
        """指定従業員のタスクを開始行の昇順で取得（未知の従業員は空リスト）"""
        return list(self._tasks.get(employee_id, []))

    def all_tasks(self) -> List[Task]:
        """全タスクを従業員ごと・開始行順で取得"""
        return [task for tasks in self._tasks.values() for task in tasks]

    def get_task(self, task_id: str) -> Task:
        """タスクIDでタスクを取得"""
        task = self._find(task_id)
        if task is None:
            raise NotFoundError(f"タスクが見つかりません: {task_id}")
        return task

    def has_task(self, task_id: str) -> bool:
        return self._find(task_id) is not None

    def add_task(self, task: Task) -> None:
        """タスクを追加（重複解消は呼び出し側で実施済みであること）"""
        if self._find(task.id) is not None:
            raise ValueError(f"タスクIDが重複しています: {task.id}")
        tasks = self._tasks.setdefault(task.employee_id, [])
        tasks.append(task)
        tasks.sort(key=lambda t: t.start)

    def remove_task(self, task_id: str) -> Task:
        """タスクを削除して返す"""
        task = self.get_task(task_id)
        self._tasks[task.employee_id] = [t for t in self._tasks[task.employee_id] if t.id != task_id]
        return task

    def replace_employee_tasks(self, employee_id: str, tasks: List[Task]) -> None:
        """指定従業員のタスク一覧を置き換える"""
        for task in tasks:
            if task.employee_id != employee_id:
                raise ValueError(f"他の従業員のタスクは設定できません: {task.id} ({task.employee_id})")
        self._tasks[employee_id] = sorted(tasks, key=lambda t: t.start)

    def clear_employee(self, employee_id: str) -> List[Task]:
        """指定従業員のタスクをすべて削除して返す"""
        return self._tasks.pop(employee_id, [])

    def _find(self, task_id: str) -> Optional[Task]:
        for tasks in self._tasks.values():
            for task in tasks:
                if task.id == task_id:
                    return task
        return None
