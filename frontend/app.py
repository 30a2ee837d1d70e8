# frontend/app.py
# Projects showcase – list, create, edit and delete portfolio projects
#
# Run from repo root: streamlit run frontend/app.py
# Or from frontend folder: streamlit run app.py

from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

# Import environment config (robust fallback for different run contexts)
try:
    from frontend.config import ENABLE_DEBUG_UI, ENV, IS_DEV
except ModuleNotFoundError:
    from config import ENABLE_DEBUG_UI, ENV, IS_DEV

try:
    from frontend.models import Project
    from frontend.presentation import (
        PAGE_CSS,
        grid_rows,
        partition_counts,
        partition_projects,
        projects_dataframe,
        render_featured_block,
        render_project_card,
        render_project_detail,
    )
    from frontend.project_form import render_project_form
    from frontend import projects_state as ps
    from frontend.dev_observability import clear_debug_history, export_snapshot_json, get_recent_events
except ModuleNotFoundError:
    from models import Project
    from presentation import (
        PAGE_CSS,
        grid_rows,
        partition_counts,
        partition_projects,
        projects_dataframe,
        render_featured_block,
        render_project_card,
        render_project_detail,
    )
    from project_form import render_project_form
    import projects_state as ps
    from dev_observability import clear_debug_history, export_snapshot_json, get_recent_events


KEYS_OF_INTEREST = [
    "nav_page",
    "detail_project_id",
    "projects",
    "projects_loaded",
    "projects_busy",
    "project_form",
    "pending_delete_id",
]

GRID_COLUMNS = 3


# --------------------------------------------------------------------
# Routing (?project=<id> is the detail route)
# --------------------------------------------------------------------


def route_from_query_params(ss: Dict[str, Any]) -> None:
    """Apply the URL to session navigation at the top of every run."""
    project_param = st.query_params.get("project")
    if project_param:
        if ss.get("nav_page") != ps.PAGE_DETAIL or str(ss.get("detail_project_id")) != project_param:
            ps.open_detail(ss, project_param)
    elif ss.get("nav_page") == ps.PAGE_DETAIL:
        ps.back_to_list(ss)


def sync_query_params(ss: Dict[str, Any]) -> None:
    """Mirror session navigation into the URL after a controller action."""
    if ss.get("nav_page") == ps.PAGE_DETAIL and ss.get("detail_project_id") is not None:
        st.query_params["project"] = str(ss["detail_project_id"])
    elif "project" in st.query_params:
        del st.query_params["project"]


def rerun(ss: Dict[str, Any]) -> None:
    sync_query_params(ss)
    st.rerun()


# --------------------------------------------------------------------
# Action handlers (thin wrappers so widgets stay declarative)
# --------------------------------------------------------------------


def handle_form_submit(form_data: Dict[str, Any], existing_project: Optional[Project]) -> None:
    ss = st.session_state
    if ps.submit_form(ss, form_data, existing_project):
        rerun(ss)
    # Failure: form stays open, error already logged


def handle_form_cancel() -> None:
    ss = st.session_state
    ps.cancel_form(ss)
    rerun(ss)


def render_delete_prompt(ss: Dict[str, Any]) -> None:
    """Yes/no confirmation for the pending delete, if any."""
    pending = ss.get("pending_delete_id")
    if pending is None:
        return

    project = ps.find_project(ss, pending)
    label = f'"{project.title}"' if project else f"#{pending}"
    st.warning(f"🗑️ Are you sure you want to delete project {label}?")

    col_yes, col_no, _ = st.columns([1, 1, 4])
    with col_yes:
        if st.button("Yes, delete", key="delete_confirm_yes", type="primary", disabled=ps.is_busy(ss)):
            ps.confirm_delete(ss)
            rerun(ss)
    with col_no:
        if st.button("No", key="delete_confirm_no"):
            ps.decline_delete(ss)
            rerun(ss)


def render_item_actions(ss: Dict[str, Any], project: Project, key_scope: str) -> None:
    """Edit/Delete buttons for one project."""
    busy = ps.is_busy(ss)
    col_edit, col_delete = st.columns(2)
    with col_edit:
        if st.button("Edit", key=f"{key_scope}_edit_{project.id}", disabled=busy):
            ps.request_edit(ss, project)
            rerun(ss)
    with col_delete:
        if st.button("Delete", key=f"{key_scope}_delete_{project.id}", disabled=busy):
            ps.request_delete(ss, project.id)
            rerun(ss)


# --------------------------------------------------------------------
# Pages
# --------------------------------------------------------------------


def render_sidebar(ss: Dict[str, Any]) -> None:
    with st.sidebar:
        st.markdown("## 🗂️ Projects")

        counts = partition_counts(ss.get("projects", []))
        st.caption(f"{counts['featured']} featured · {counts['standard']} more")

        if ss.get("nav_page") == ps.PAGE_DETAIL:
            if st.button("← All projects", key="sidebar_back"):
                ps.back_to_list(ss)
                rerun(ss)

        if st.button("🔄 Refresh", key="sidebar_refresh", disabled=ps.is_busy(ss)):
            ps.refresh_projects(ss)
            rerun(ss)

        st.checkbox("Table view", key="projects_table_view")

        if ENABLE_DEBUG_UI:
            render_debug_panel(ss)


def render_debug_panel(ss: Dict[str, Any]) -> None:
    with st.expander("🐛 State Debug", expanded=False):
        st.caption(f"ENV={ENV}")
        st.json(get_recent_events(ss, limit=15))
        st.download_button(
            "Export snapshot",
            data=export_snapshot_json(ss, KEYS_OF_INTEREST),
            file_name="projects_state_snapshot.json",
            mime="application/json",
        )
        if st.button("Clear history", key="debug_clear_history"):
            clear_debug_history(ss)
            st.rerun()


def render_projects_list(ss: Dict[str, Any]) -> None:
    st.markdown('<h1 class="projects-title">Projects</h1>', unsafe_allow_html=True)

    _, col_create, _ = st.columns([2, 1, 2])
    with col_create:
        if st.button("Create Project", key="project_create", width="stretch"):
            ps.request_create(ss)
            rerun(ss)

    render_project_form(
        ss["project_form"],
        on_cancel=handle_form_cancel,
        on_submit=handle_form_submit,
        disabled=ps.is_busy(ss),
    )
    render_delete_prompt(ss)

    projects = ss.get("projects", [])
    if not projects:
        st.info("No projects yet. Create one to get started.")
        return

    if ss.get("projects_table_view"):
        st.dataframe(projects_dataframe(projects), width="stretch", hide_index=True)
        return

    featured, standard = partition_projects(projects)

    for idx, project in enumerate(featured):
        st.markdown(render_featured_block(project, idx), unsafe_allow_html=True)

    index = 0
    for row in grid_rows(standard, GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for col, project in zip(columns, row):
            with col:
                st.markdown(render_project_card(project, index), unsafe_allow_html=True)
                render_item_actions(ss, project, key_scope="card")
            index += 1


def render_project_detail_page(ss: Dict[str, Any]) -> None:
    project = ps.find_project(ss, ss.get("detail_project_id"))
    if project is None:
        st.warning(f"Project #{ss.get('detail_project_id')} was not found.")
        if st.button("← Back to projects", key="detail_missing_back"):
            ps.back_to_list(ss)
            rerun(ss)
        return

    if st.button("← Back to projects", key="detail_back"):
        ps.back_to_list(ss)
        rerun(ss)

    render_project_form(
        ss["project_form"],
        on_cancel=handle_form_cancel,
        on_submit=handle_form_submit,
        disabled=ps.is_busy(ss),
    )
    render_delete_prompt(ss)

    st.markdown(render_project_detail(project), unsafe_allow_html=True)
    render_item_actions(ss, project, key_scope="detail")


# --------------------------------------------------------------------
# Main
# --------------------------------------------------------------------


def main() -> None:
    st.set_page_config(page_title="Projects", layout="wide")
    st.markdown(PAGE_CSS, unsafe_allow_html=True)

    ss = st.session_state
    ps.init_projects_state(ss)

    route_from_query_params(ss)
    ps.load_projects_once(ss)

    if IS_DEV:
        print(f"[ROUTING] page={ss.get('nav_page')} | detail={ss.get('detail_project_id')} | "
              f"projects={len(ss.get('projects', []))} | form={ss['project_form'].mode.value}")

    render_sidebar(ss)

    if ss.get("nav_page") == ps.PAGE_DETAIL:
        render_project_detail_page(ss)
    else:
        render_projects_list(ss)


if __name__ == "__main__":
    main()
