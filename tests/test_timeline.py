#!/usr/bin/env python3
"""
タイムラインモデルのユニットテスト

時刻文字列と行インデックスの相互変換をテストします。
"""

import sys
import os
import pytest

# srcディレクトリをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from roster.models.exceptions import InvalidRangeError
from roster.models.timeline import (
    TOTAL_ROWS, to_row, row_to_time, row_range_label,
    validate_row, validate_range, parse_shift_hours
)


class TestToRow:
    """to_rowのテスト"""

    def test_day_start(self):
        """開始時刻は0行目"""
        assert to_row("09:30") == 0

    def test_slot_boundaries(self):
        """15分ごとに1行進む"""
        assert to_row("09:45") == 1
        assert to_row("10:00") == 2
        assert to_row("12:30") == 12

    def test_floor_within_slot(self):
        """スロット途中の時刻は切り捨て"""
        assert to_row("09:44") == 0
        assert to_row("10:14") == 2

    def test_clamped(self):
        """範囲外の時刻は [0, TOTAL_ROWS] に丸める"""
        assert to_row("08:00") == 0
        assert to_row("16:00") == TOTAL_ROWS
        assert to_row("18:30") == TOTAL_ROWS

    def test_single_digit_hour(self):
        """1桁の時も受け付ける"""
        assert to_row("9:30") == 0

    @pytest.mark.parametrize("value", ["", "0930", "ab:cd", "25:00", "10:75"])
    def test_malformed(self, value):
        """不正な形式はInvalidRangeError"""
        with pytest.raises(InvalidRangeError):
            to_row(value)


class TestRowToTime:
    """row_to_timeのテスト"""

    def test_conversion(self):
        assert row_to_time(0) == "09:30"
        assert row_to_time(2) == "10:00"
        assert row_to_time(TOTAL_ROWS) == "16:00"

    def test_round_trip(self):
        """全ての有効な行で to_row(row_to_time(r)) == r"""
        for row in range(TOTAL_ROWS):
            assert to_row(row_to_time(row)) == row

    def test_range_label(self):
        assert row_range_label(0, 2) == "09:30-10:00"
        assert row_range_label(3, 5) == "10:15-10:45"


class TestValidation:
    """範囲検証のテスト"""

    def test_valid_row(self):
        validate_row(0)
        validate_row(TOTAL_ROWS - 1)

    @pytest.mark.parametrize("row", [-1, TOTAL_ROWS, 100, 1.5, "3", True])
    def test_invalid_row(self, row):
        with pytest.raises(InvalidRangeError):
            validate_row(row)

    def test_valid_range(self):
        validate_range(0, TOTAL_ROWS)
        validate_range(5, 6)

    @pytest.mark.parametrize("start,end", [(3, 3), (4, 3), (-1, 2), (0, TOTAL_ROWS + 1)])
    def test_invalid_range(self, start, end):
        with pytest.raises(InvalidRangeError):
            validate_range(start, end)

    def test_invalid_range_is_value_error(self):
        """InvalidRangeErrorはValueErrorとしても捕捉できる"""
        with pytest.raises(ValueError):
            validate_range(2, 1)


class TestParseShiftHours:
    """parse_shift_hoursのテスト"""

    def test_parse(self):
        assert parse_shift_hours("09:45-16:00") == (1, TOTAL_ROWS)
        assert parse_shift_hours(" 10:00 - 12:00 ") == (2, 10)

    @pytest.mark.parametrize("text", ["10:00", "10:00-", "12:00-10:00", "10:00-10:00", "a-b"])
    def test_invalid(self, text):
        with pytest.raises(InvalidRangeError):
            parse_shift_hours(text)
