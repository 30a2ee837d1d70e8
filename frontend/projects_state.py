"""
frontend/projects_state.py
List state controller for the Projects page.

Owns the session keys below; nothing else on the page writes them.

    projects            cached collection (replaced wholesale on refresh)
    project_form        FormState: Closed | CreatingNew | Editing(project)
    projects_loaded     initial fetch done for this page activation
    projects_busy       a save/delete is in flight
    pending_delete_id   id waiting for the yes/no confirmation
    nav_page            "Projects" or "Project Detail"
    detail_project_id   id shown by the detail view

All functions take the session mapping explicitly so they work with
st.session_state at runtime and with a plain dict in tests. None of them
call st.rerun(); the page decides when to rerun.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

try:
    from frontend.api_client import delete_project, fetch_projects, save_project
    from frontend.config import IS_DEV
    from frontend.dev_observability import track_event
    from frontend.models import FormState, Project, ProjectId
except ModuleNotFoundError:
    from api_client import delete_project, fetch_projects, save_project
    from config import IS_DEV
    from dev_observability import track_event
    from models import FormState, Project, ProjectId

PAGE_LIST = "Projects"
PAGE_DETAIL = "Project Detail"


def init_projects_state(ss: Dict[str, Any]) -> None:
    """Set default keys. Idempotent, safe on every rerun."""
    ss.setdefault("projects", [])
    ss.setdefault("project_form", FormState.closed())
    ss.setdefault("projects_loaded", False)
    ss.setdefault("projects_busy", False)
    ss.setdefault("pending_delete_id", None)
    ss.setdefault("nav_page", PAGE_LIST)
    ss.setdefault("detail_project_id", None)


def _same_id(a: Any, b: Any) -> bool:
    # Query params are strings, API ids may be ints
    return a is not None and b is not None and str(a) == str(b)


def is_busy(ss: Dict[str, Any]) -> bool:
    return bool(ss.get("projects_busy"))


# --------------------------------------------------------------------
# Loading
# --------------------------------------------------------------------


def refresh_projects(ss: Dict[str, Any]) -> List[Project]:
    """
    Replace the cached collection with a fresh list from the API.

    When nothing usable came back the cached collection is kept as is.
    """
    projects = fetch_projects()
    if projects is None:
        print(f"[PROJECTS] Refresh failed, keeping {len(ss.get('projects', []))} cached project(s)")
        track_event(ss, "projects_refresh_failed")
        return ss.get("projects", [])

    ss["projects"] = projects
    track_event(ss, "projects_refreshed", {"projects": projects})
    if IS_DEV:
        print(f"[PROJECTS] Loaded {len(projects)} project(s)")
    return projects


def load_projects_once(ss: Dict[str, Any]) -> bool:
    """
    Initial fetch for this page activation.

    Returns True if a fetch happened on this call. A failed fetch still
    counts as loaded; the page shows an empty list.
    """
    if ss.get("projects_loaded"):
        return False
    ss["projects_loaded"] = True
    ss["projects"] = []
    refresh_projects(ss)
    return True


def find_project(ss: Dict[str, Any], project_id: Optional[ProjectId]) -> Optional[Project]:
    for project in ss.get("projects", []):
        if _same_id(project.id, project_id):
            return project
    return None


# --------------------------------------------------------------------
# Form
# --------------------------------------------------------------------


def request_create(ss: Dict[str, Any]) -> None:
    ss["project_form"] = FormState.creating()
    track_event(ss, "form_opened", {"form": ss["project_form"]})


def request_edit(ss: Dict[str, Any], project: Project) -> None:
    ss["project_form"] = FormState.editing(project)
    track_event(ss, "form_opened", {"form": ss["project_form"]})


def cancel_form(ss: Dict[str, Any]) -> None:
    ss["project_form"] = FormState.closed()
    track_event(ss, "form_cancelled")


def submit_form(
    ss: Dict[str, Any],
    form_data: Dict[str, Any],
    existing_project: Optional[Project] = None,
) -> bool:
    """
    Create or update, then resynchronize the whole collection and close the form.

    On failure the form stays open and the cached collection is untouched.
    """
    if is_busy(ss):
        print("[PROJECTS] Ignoring submit: another operation is in progress")
        return False

    ss["projects_busy"] = True
    try:
        saved = save_project(form_data, existing_project)
        if not saved:
            track_event(ss, "project_save_failed", {"project_id": getattr(existing_project, "id", None)})
            return False

        refresh_projects(ss)
        ss["project_form"] = FormState.closed()
        track_event(ss, "project_saved", {"project_id": getattr(existing_project, "id", None)})
        return True
    finally:
        ss["projects_busy"] = False


# --------------------------------------------------------------------
# Delete (two-step: request -> confirm/decline)
# --------------------------------------------------------------------


def request_delete(ss: Dict[str, Any], project_id: ProjectId) -> None:
    """Ask for confirmation before deleting project_id."""
    ss["pending_delete_id"] = project_id
    track_event(ss, "delete_requested", {"project_id": project_id})


def decline_delete(ss: Dict[str, Any]) -> None:
    if ss.get("pending_delete_id") is not None:
        track_event(ss, "delete_declined", {"project_id": ss["pending_delete_id"]})
    ss["pending_delete_id"] = None


def confirm_delete(ss: Dict[str, Any]) -> bool:
    """
    Delete the project awaiting confirmation.

    On success the matching entry is evicted from the cache and, if the
    detail view was showing it, navigation goes back to the list.
    """
    project_id = ss.get("pending_delete_id")
    if project_id is None:
        return False

    if is_busy(ss):
        print("[PROJECTS] Ignoring delete: another operation is in progress")
        return False

    ss["projects_busy"] = True
    ss["pending_delete_id"] = None
    try:
        if not delete_project(project_id):
            track_event(ss, "project_delete_failed", {"project_id": project_id})
            return False

        ss["projects"] = [p for p in ss.get("projects", []) if not _same_id(p.id, project_id)]

        if ss.get("nav_page") == PAGE_DETAIL and _same_id(ss.get("detail_project_id"), project_id):
            back_to_list(ss)

        form = ss.get("project_form")
        if form is not None and form.is_editing and _same_id(form.project.id, project_id):
            ss["project_form"] = FormState.closed()

        track_event(ss, "project_deleted", {"project_id": project_id})
        return True
    finally:
        ss["projects_busy"] = False


# --------------------------------------------------------------------
# Navigation
# --------------------------------------------------------------------


def open_detail(ss: Dict[str, Any], project_id: ProjectId) -> None:
    ss["nav_page"] = PAGE_DETAIL
    ss["detail_project_id"] = project_id
    track_event(ss, "navigate", {"page": PAGE_DETAIL, "project_id": project_id})


def back_to_list(ss: Dict[str, Any]) -> None:
    ss["nav_page"] = PAGE_LIST
    ss["detail_project_id"] = None
    track_event(ss, "navigate", {"page": PAGE_LIST})
