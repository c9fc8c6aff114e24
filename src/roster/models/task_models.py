"""
タスク・従業員モデル

タイムライン上に配置するタスク（作業区間）と従業員のデータ構造を定義します。
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidRangeError
from .timeline import TOTAL_ROWS, row_range_label, validate_range


class TaskKind(Enum):
    """タスク種別の定義"""
    FRONT = "front"                    # 受付
    GALLERY = "gallery"                # 展示室
    BREAK = "break"                    # 休憩
    PREP = "prep"                      # 準備
    TOUR = "tour"                      # 一般ツアー
    TIDY = "tidy"                      # 片付け
    SCHOOL_PRE = "school-pre"          # 学校団体 事前準備
    SCHOOL_PROGRAM = "school-program"  # 学校団体 プログラム

    @property
    def label(self) -> str:
        """表示用の標準ラベル"""
        return TASK_LABELS[self]

    @property
    def color(self) -> str:
        """表示用の色"""
        return TASK_COLORS[self]

    @property
    def is_tour_like(self) -> bool:
        """ツアー系（結合対象外）の種別かどうか"""
        return self in (TaskKind.TOUR, TaskKind.SCHOOL_PROGRAM)


TASK_LABELS = {
    TaskKind.FRONT: "Front Desk",
    TaskKind.GALLERY: "Gallery",
    TaskKind.BREAK: "Break",
    TaskKind.PREP: "Prep",
    TaskKind.TOUR: "Public Tour",
    TaskKind.TIDY: "Finish",
    TaskKind.SCHOOL_PRE: "School Pre",
    TaskKind.SCHOOL_PROGRAM: "School Program",
}

TASK_COLORS = {
    TaskKind.FRONT: "#FFEB3B",
    TaskKind.GALLERY: "#A5D6A7",
    TaskKind.BREAK: "#E1BEE7",
    TaskKind.PREP: "#90CAF9",
    TaskKind.TOUR: "#90CAF9",
    TaskKind.TIDY: "#FFCC80",
    TaskKind.SCHOOL_PRE: "#90CAF9",
    TaskKind.SCHOOL_PROGRAM: "#90CAF9",
}


@dataclass(frozen=True)
class Task:
    """タスク（従業員に割り当てられた作業区間 [start, end)）"""
    id: str
    employee_id: str
    kind: TaskKind
    label: str
    start: int
    end: int

    def __post_init__(self):
        """タスク作成後の検証"""
        if not self.id or not self.employee_id:
            raise ValueError("タスクIDと従業員IDは必須です")
        if not isinstance(self.kind, TaskKind):
            raise ValueError(f"タスク種別が不正です: {self.kind!r}")
        validate_range(self.start, self.end)

    @property
    def length(self) -> int:
        """行数"""
        return self.end - self.start

    @property
    def time_range(self) -> str:
        """"09:30-10:00" 形式の時間帯"""
        return row_range_label(self.start, self.end)

    def overlaps_with(self, start: int, end: int) -> bool:
        """指定範囲と重複するかチェック"""
        return not (self.end <= start or self.start >= end)


@dataclass
class Employee:
    """従業員（勤務時間は行インデックスで保持）"""
    id: str
    name: str
    shift_start: int = 0
    shift_end: int = TOTAL_ROWS

    def __post_init__(self):
        """従業員作成後の検証"""
        if not self.id:
            raise ValueError("従業員IDは必須です")
        if not self.name or not self.name.strip():
            raise ValueError("従業員名は必須です")
        try:
            validate_range(self.shift_start, self.shift_end)
        except InvalidRangeError as e:
            raise InvalidRangeError(f"勤務時間が不正です ({self.name}): {e}") from e

    @property
    def shift_label(self) -> str:
        """勤務時間の表示用ラベル"""
        return row_range_label(self.shift_start, self.shift_end)

    def covers(self, start: int, end: int) -> bool:
        """指定範囲が勤務時間内に収まるかチェック"""
        return self.shift_start <= start and end <= self.shift_end
