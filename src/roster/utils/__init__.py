"""
ユーティリティパッケージ

このパッケージは、アプリケーション全体で使用される共通機能を提供します。
設定管理、ログ機能、表示用のデータ変換などのユーティリティが含まれています。
StreamlitのUIコンポーネントは ui_components から直接インポートしてください。
"""

# 設定管理とログ機能
from .config import get_config, reload_config, AppConfig
from .logger import setup_logging, get_logger, log_extra_fields

from .schedule_converter import (
    convert_tasks_to_dataframe,
    convert_store_to_timeline_schedule,
    convert_store_to_kind_grid
)
from .workload_calculator import calc_kind_minutes
from .constants import (
    ROWS,
    TIME_COLUMNS,
    TASK_TABLE_COLUMNS,
    TASK_KIND_CHOICES,
    EMPTY_CELL,
    OFF_SHIFT_CELL
)

__all__ = [
    # 設定管理とログ機能
    'get_config',
    'reload_config',
    'AppConfig',
    'setup_logging',
    'get_logger',
    'log_extra_fields',

    # スケジュール変換機能
    'convert_tasks_to_dataframe',
    'convert_store_to_timeline_schedule',
    'convert_store_to_kind_grid',

    # 作業時間集計
    'calc_kind_minutes',

    # 定数
    'ROWS',
    'TIME_COLUMNS',
    'TASK_TABLE_COLUMNS',
    'TASK_KIND_CHOICES',
    'EMPTY_CELL',
    'OFF_SHIFT_CELL'
]
