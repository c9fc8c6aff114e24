"""
UIコンポーネントモジュール

Streamlitアプリケーションで使用する共通UIコンポーネントを提供します。
"""

import streamlit as st
from typing import Optional, Tuple

from ..algorithms.task_scheduler import TaskScheduler
from ..models.task_models import Employee, TaskKind
from ..models.timeline import TOTAL_ROWS, row_to_time, row_range_label
from .constants import TASK_KIND_CHOICES, EMPTY_CELL
from .schedule_converter import (
    convert_store_to_timeline_schedule, convert_store_to_kind_grid, convert_tasks_to_dataframe
)
from .workload_calculator import calc_kind_minutes

_KIND_COLORS = {kind.value: kind.color for kind in TaskKind}


def _row_options(include_end: bool = False):
    last = TOTAL_ROWS + 1 if include_end else TOTAL_ROWS
    return list(range(last))


def display_roster_grid(scheduler: TaskScheduler) -> None:
    """
    従業員別タイムライン表を種別ごとに色付けして表示

    Args:
        scheduler: タスクスケジューラー
    """
    # 時刻を行、従業員を列にして表示
    schedule = convert_store_to_timeline_schedule(scheduler.roster, scheduler.store, mark_off_shift=True).T
    styles = convert_store_to_kind_grid(scheduler.roster, scheduler.store).T.map(
        lambda v: f"background-color: {_KIND_COLORS[v]}" if v != EMPTY_CELL else ""
    )

    st.subheader("📅 タイムライン")
    st.dataframe(schedule.style.apply(lambda _: styles, axis=None), width="stretch")


def create_task_picker_form(scheduler: TaskScheduler) -> Optional[Tuple[str, int, TaskKind]]:
    """
    タスク配置フォームを作成

    Returns:
        (従業員ID, 行, 種別)のタプル。送信されていない場合はNone
    """
    employees = scheduler.roster.employees()
    if not employees:
        st.sidebar.info("従業員が登録されていません")
        return None

    with st.sidebar.form("place_task"):
        st.subheader("➕ タスク配置")
        employee = st.selectbox("従業員", employees, format_func=lambda e: e.name)
        row = st.selectbox("時刻", _row_options(), format_func=row_to_time)
        kind = st.selectbox("種別", TASK_KIND_CHOICES, format_func=lambda k: k.label)
        if st.form_submit_button("配置"):
            return employee.id, row, kind
    return None


def create_task_edit_form(scheduler: TaskScheduler) -> Optional[Tuple[str, str, int, int]]:
    """
    既存タスクの移動・削除フォームを作成

    Returns:
        ("move"|"delete", タスクID, 開始行, 終了行)のタプル。送信されていない場合はNone
    """
    tasks = scheduler.store.all_tasks()
    if not tasks:
        return None

    names = {e.id: e.name for e in scheduler.roster.employees()}
    with st.sidebar.form("edit_task"):
        st.subheader("✏️ タスク編集")
        task = st.selectbox(
            "タスク", tasks,
            format_func=lambda t: f"{names.get(t.employee_id, t.employee_id)} / {t.label} {t.time_range}"
        )
        start = st.selectbox("開始", _row_options(), format_func=row_to_time, key="edit_start")
        end = st.selectbox("終了", _row_options(include_end=True), index=1,
                           format_func=row_to_time, key="edit_end")
        col1, col2 = st.columns(2)
        move = col1.form_submit_button("移動")
        delete = col2.form_submit_button("🗑️ 削除")
        if move:
            return "move", task.id, start, end
        if delete:
            return "delete", task.id, task.start, task.end
    return None


def create_employee_manage_form(employees) -> Optional[Tuple[str, Optional[Employee], str, str]]:
    """
    従業員管理フォーム（追加・名前変更・勤務時間変更・削除）を作成

    Returns:
        (操作, 対象従業員, 名前, 勤務時間)のタプル。送信されていない場合はNone
    """
    with st.sidebar.expander("👥 従業員管理 (クリックで開閉)", expanded=False):
        action = st.radio("操作", ["add", "rename", "hours", "delete"],
                          format_func=lambda a: {"add": "追加", "rename": "名前変更",
                                                 "hours": "勤務時間変更", "delete": "削除"}[a])
        target = None
        if action != "add":
            if not employees:
                st.info("従業員が登録されていません")
                return None
            target = st.selectbox("対象", employees, format_func=lambda e: f"{e.name} ({e.shift_label})")

        name = ""
        hours = ""
        if action in ("add", "rename"):
            name = st.text_input("名前", value=target.name if target else "")
        if action in ("add", "hours"):
            default_hours = target.shift_label if target else row_range_label(0, TOTAL_ROWS)
            hours = st.text_input("勤務時間 (HH:MM-HH:MM)", value=default_hours)

        if st.button("実行"):
            return action, target, name, hours
    return None


def display_task_table(scheduler: TaskScheduler) -> None:
    """タスク一覧と種別別作業時間を表示"""
    st.subheader("📋 タスク一覧")
    st.dataframe(convert_tasks_to_dataframe(scheduler.store.all_tasks()), width="stretch")

    st.subheader("⏱️ 種別別作業時間（分）")
    st.dataframe(calc_kind_minutes(scheduler.roster, scheduler.store), width="stretch")
