"""
定数定義モジュール

ロスターアプリで使用する表示用の定数を定義します。
"""

from ..models.task_models import TaskKind
from ..models.timeline import TOTAL_ROWS, row_to_time

# 時間設定
ROWS = list(range(TOTAL_ROWS))
TIME_COLUMNS = [row_to_time(r) for r in ROWS]  # 09:30〜15:45

# タスク一覧の列
TASK_TABLE_COLUMNS = ["id", "employee_id", "kind", "label", "start", "end", "time_range"]

# タスク種別の選択肢（表示順）
TASK_KIND_CHOICES = [
    TaskKind.FRONT,
    TaskKind.GALLERY,
    TaskKind.BREAK,
    TaskKind.PREP,
    TaskKind.TOUR,
    TaskKind.TIDY,
    TaskKind.SCHOOL_PRE,
    TaskKind.SCHOOL_PROGRAM
]

# 空きセルの表示
EMPTY_CELL = ""
OFF_SHIFT_CELL = "—"
