"""
従業員ロスター

タイムラインに表示する従業員の一覧（追加・名前変更・勤務時間変更・削除）を管理します。
タスクはロスターの従業員IDを外部キーとして参照します。
"""

import re
from typing import Dict, Iterator, List, Optional

from .exceptions import NotFoundError
from .task_models import Employee
from .timeline import to_row, validate_range


def _slugify(name: str) -> str:
    slug = re.sub(r'[^0-9a-z]+', '_', name.strip().lower()).strip('_')
    return slug or "employee"


class EmployeeRoster:
    """従業員ロスター（追加順を保持）"""

    def __init__(self, employees: Optional[List[Employee]] = None):
        self._employees: Dict[str, Employee] = {}
        for employee in employees or []:
            if employee.id in self._employees:
                raise ValueError(f"従業員IDが重複しています: {employee.id}")
            self._check_unique_name(employee.name)
            self._employees[employee.id] = employee

    def __contains__(self, employee_id: str) -> bool:
        return employee_id in self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.employees())

    def employees(self) -> List[Employee]:
        """従業員一覧を追加順で取得"""
        return list(self._employees.values())

    def get_employee(self, employee_id: str) -> Employee:
        """従業員IDで従業員を取得"""
        try:
            return self._employees[employee_id]
        except KeyError:
            raise NotFoundError(f"従業員が見つかりません: {employee_id}") from None

    def add_employee(self, name: str, shift_start: int, shift_end: int,
                     employee_id: Optional[str] = None) -> Employee:
        """
        従業員を追加

        Args:
            name: 従業員名
            shift_start: 勤務開始行
            shift_end: 勤務終了行（この行を含まない）
            employee_id: 従業員ID（Noneの場合は名前から "e_<name>" を生成）

        Returns:
            追加された従業員
        """
        if employee_id is None:
            employee_id = self._unique_id(f"e_{_slugify(name)}")
        elif employee_id in self._employees:
            raise ValueError(f"従業員IDが重複しています: {employee_id}")
        self._check_unique_name(name)

        employee = Employee(id=employee_id, name=name.strip(),
                            shift_start=shift_start, shift_end=shift_end)
        self._employees[employee.id] = employee
        return employee

    def rename_employee(self, employee_id: str, name: str) -> Employee:
        """従業員名を変更"""
        employee = self.get_employee(employee_id)
        if not name or not name.strip():
            raise ValueError("従業員名は必須です")
        self._check_unique_name(name, except_id=employee_id)
        employee.name = name.strip()
        return employee

    def set_shift_hours(self, employee_id: str, shift_start: int, shift_end: int) -> Employee:
        """勤務時間を変更（既存タスクは変更しない）"""
        employee = self.get_employee(employee_id)
        validate_range(shift_start, shift_end)
        employee.shift_start = shift_start
        employee.shift_end = shift_end
        return employee

    def remove_employee(self, employee_id: str) -> Employee:
        """従業員を削除して返す"""
        employee = self.get_employee(employee_id)
        del self._employees[employee_id]
        return employee

    def _check_unique_name(self, name: str, except_id: Optional[str] = None) -> None:
        # 大文字小文字と前後の空白は無視して比較
        key = name.strip().casefold()
        for employee in self._employees.values():
            if employee.id != except_id and employee.name.strip().casefold() == key:
                raise ValueError(f"従業員名が重複しています: {name.strip()}")

    def _unique_id(self, base_id: str) -> str:
        candidate = base_id
        suffix = 2
        while candidate in self._employees:
            candidate = f"{base_id}_{suffix}"
            suffix += 1
        return candidate


def create_default_roster() -> EmployeeRoster:
    """デフォルトの従業員ロスターを作成"""
    return EmployeeRoster([
        Employee("e_john", "John", to_row("09:30"), to_row("16:00")),
        Employee("e_robert", "Robert", to_row("09:45"), to_row("16:00")),
        Employee("e_mary", "Mary", to_row("10:00"), to_row("16:00")),
    ])
