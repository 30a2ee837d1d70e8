"""
frontend/project_form.py
Create/edit form for a project.

The form owns field validation; the page only receives a clean payload
through on_submit(form_data, existing_project).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import streamlit as st

try:
    from frontend.models import FormState, Project
except ModuleNotFoundError:
    from models import FormState, Project

SubmitCallback = Callable[[Dict[str, Any], Optional[Project]], Any]


def parse_technologies(raw: str) -> List[str]:
    """Comma/newline separated input -> ordered, de-duplicated tags."""
    tags: List[str] = []
    for chunk in (raw or "").replace("\n", ",").split(","):
        tag = chunk.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def build_form_payload(
    title: str,
    description: str,
    image_url: str,
    technologies_text: str,
    featured: bool,
) -> Dict[str, Any]:
    """Wire payload for POST/PUT /api/projects."""
    image_url = (image_url or "").strip()
    return {
        "title": (title or "").strip(),
        "description": (description or "").strip(),
        "imageUrl": image_url or None,
        "technologies": parse_technologies(technologies_text),
        "featured": bool(featured),
    }


def validate_form_payload(payload: Dict[str, Any]) -> List[str]:
    errors = []
    if not payload.get("title"):
        errors.append("Title is required.")
    image_url = payload.get("imageUrl")
    if image_url and not image_url.startswith(("http://", "https://", "/")):
        errors.append("Image URL must be an absolute http(s) URL or a site path.")
    return errors


def render_project_form(
    form_state: FormState,
    on_cancel: Callable[[], Any],
    on_submit: SubmitCallback,
    disabled: bool = False,
) -> None:
    """Render the form when it is open; prefilled when editing."""
    if not form_state.is_open:
        return

    project = form_state.project
    # Widget keys are scoped per target so switching targets doesn't reuse stale values
    key_prefix = f"project_form_{project.id}" if project is not None else "project_form_new"

    heading = f"✏️ Edit Project: {project.title}" if project is not None else "➕ Create Project"
    st.markdown(f"### {heading}")

    with st.form(key=key_prefix, clear_on_submit=False):
        title = st.text_input("Title", value=project.title if project else "", key=f"{key_prefix}_title")
        description = st.text_area(
            "Description",
            value=project.description if project else "",
            key=f"{key_prefix}_description",
        )
        image_url = st.text_input(
            "Image URL (optional)",
            value=(project.image_url or "") if project else "",
            key=f"{key_prefix}_image_url",
        )
        technologies = st.text_input(
            "Technologies (comma separated)",
            value=", ".join(project.technologies) if project else "",
            key=f"{key_prefix}_technologies",
        )
        featured = st.checkbox("Featured", value=project.featured if project else False, key=f"{key_prefix}_featured")

        col_save, col_cancel = st.columns(2)
        with col_save:
            submitted = st.form_submit_button("💾 Save", type="primary", disabled=disabled)
        with col_cancel:
            cancelled = st.form_submit_button("Cancel")

    if cancelled:
        on_cancel()
        return

    if submitted:
        payload = build_form_payload(title, description, image_url, technologies, featured)
        errors = validate_form_payload(payload)
        if errors:
            for err in errors:
                st.warning(f"⚠️ {err}")
            return
        on_submit(payload, project)
