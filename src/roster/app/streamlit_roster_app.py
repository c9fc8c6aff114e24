import streamlit as st
import sys
import os

# srcディレクトリをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from roster.algorithms.task_scheduler import TaskScheduler, seed_demo_tasks
from roster.models.employee_roster import EmployeeRoster, create_default_roster
from roster.models.exceptions import RosterError
from roster.models.task_store import TaskStore, SequentialIdGenerator
from roster.models.timeline import parse_shift_hours
from roster.utils.config import get_config
from roster.utils.logger import setup_logging, get_logger
from roster.utils.ui_components import (
    display_roster_grid, create_task_picker_form, create_task_edit_form,
    create_employee_manage_form, display_task_table
)

logger = get_logger(__name__)


# ---------- セッション初期化 ----------
def _create_scheduler() -> TaskScheduler:
    config = get_config()
    store = TaskStore(id_factory=SequentialIdGenerator(prefix=config.task_id_prefix))
    if config.seed_demo_roster:
        scheduler = TaskScheduler(create_default_roster(), store)
        seed_demo_tasks(scheduler)
    else:
        scheduler = TaskScheduler(EmployeeRoster(), store)
    return scheduler


def _handle_employee_action(scheduler: TaskScheduler, action: str, target, name: str, hours: str) -> None:
    if action == "add":
        start, end = parse_shift_hours(hours)
        employee = scheduler.roster.add_employee(name, start, end)
        st.sidebar.success(f"✅ {employee.name} を追加しました")
    elif action == "rename":
        scheduler.roster.rename_employee(target.id, name)
        st.sidebar.success("✅ 名前を変更しました")
    elif action == "hours":
        start, end = parse_shift_hours(hours)
        scheduler.roster.set_shift_hours(target.id, start, end)
        st.sidebar.success("✅ 勤務時間を変更しました")
    else:
        scheduler.remove_employee(target.id)
        st.sidebar.success(f"✅ {target.name} を削除しました")


def main():
    config = get_config()
    setup_logging()

    st.set_page_config(page_title=config.app_name, layout="wide")
    st.title(f"🗓️ {config.app_name}")

    if "scheduler" not in st.session_state:
        st.session_state.scheduler = _create_scheduler()
        st.session_state.selected_task_id = None
    scheduler: TaskScheduler = st.session_state.scheduler

    # ---------- Sidebar：操作 ----------
    try:
        picked = create_task_picker_form(scheduler)
        if picked:
            task = scheduler.place_task(*picked)
            st.session_state.selected_task_id = task.id

        edited = create_task_edit_form(scheduler)
        if edited:
            action, task_id, start, end = edited
            if action == "move":
                task = scheduler.move_task(task_id, start, end)
                st.session_state.selected_task_id = task.id
            else:
                scheduler.remove_task(task_id)
                st.session_state.selected_task_id = None

        employee_action = create_employee_manage_form(scheduler.roster.employees())
        if employee_action:
            _handle_employee_action(scheduler, *employee_action)
    except (RosterError, ValueError) as e:
        logger.warning(f"操作を受け付けませんでした: {e}")
        st.sidebar.error(f"⚠️ {e}")

    # ---------- 表示 ----------
    display_roster_grid(scheduler)
    display_task_table(scheduler)


if __name__ == "__main__":
    main()
