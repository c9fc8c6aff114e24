"""
タイムラインモデル

1日を15分単位の行インデックスに離散化し、時刻文字列との相互変換を提供します。
エンジン内部の時間計算はすべて行インデックスで行い、
"HH:MM" 形式の文字列は入出力時のみ使用します。
"""

import re
from typing import Tuple

from .exceptions import InvalidRangeError

# 時間設定
DAY_START_MIN = 9 * 60 + 30  # 09:30
SLOT_MINUTES = 15
TOTAL_ROWS = 26  # 09:30〜16:00

_TIME_PATTERN = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*$')


def _parse_minutes(hhmm: str) -> int:
    """"HH:MM" を0時からの経過分に変換"""
    match = _TIME_PATTERN.match(str(hhmm))
    if not match:
        raise InvalidRangeError(f"時刻の形式が不正です: {hhmm!r}")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidRangeError(f"時刻の値が不正です: {hhmm!r}")
    return hours * 60 + minutes


def to_row(hhmm: str) -> int:
    """
    時刻文字列を行インデックスに変換

    開始時刻からの経過分を15分で切り捨て、[0, TOTAL_ROWS] に丸めます。

    Args:
        hhmm: "HH:MM" 形式の時刻

    Returns:
        行インデックス
    """
    row = (_parse_minutes(hhmm) - DAY_START_MIN) // SLOT_MINUTES
    return max(0, min(TOTAL_ROWS, row))


def row_to_time(row: int) -> str:
    """行インデックスを "HH:MM" に変換（範囲チェックは呼び出し側の責任）"""
    mins = DAY_START_MIN + row * SLOT_MINUTES
    return f"{mins // 60:02d}:{mins % 60:02d}"


def row_range_label(start: int, end: int) -> str:
    """行範囲を "09:30-10:15" 形式のラベルに変換"""
    return f"{row_to_time(start)}-{row_to_time(end)}"


def validate_row(row: int) -> None:
    """行インデックスが [0, TOTAL_ROWS) に収まっているか検証"""
    if not isinstance(row, int) or isinstance(row, bool):
        raise InvalidRangeError(f"行インデックスは整数である必要があります: {row!r}")
    if not 0 <= row < TOTAL_ROWS:
        raise InvalidRangeError(f"行インデックスが範囲外です: {row} (0〜{TOTAL_ROWS - 1})")


def validate_range(start: int, end: int) -> None:
    """行範囲 [start, end) が 0 <= start < end <= TOTAL_ROWS を満たすか検証"""
    for value in (start, end):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidRangeError(f"行インデックスは整数である必要があります: {value!r}")
    if not 0 <= start < end <= TOTAL_ROWS:
        raise InvalidRangeError(f"行範囲が不正です: [{start}, {end})")


def parse_shift_hours(text: str) -> Tuple[int, int]:
    """
    "09:45-16:00" 形式の勤務時間を行範囲に変換

    Args:
        text: "開始-終了" 形式の文字列

    Returns:
        (開始行, 終了行)のタプル

    Raises:
        InvalidRangeError: 形式が不正、または範囲が空の場合
    """
    parts = str(text).split('-')
    if len(parts) != 2:
        raise InvalidRangeError(f"勤務時間の形式が不正です: {text!r}")

    start, end = to_row(parts[0]), to_row(parts[1])
    validate_range(start, end)
    return start, end
