# frontend/test_app.py
# Render tests for the Projects page using Streamlit's AppTest harness
#
# The API is patched where projects_state looks it up, so no backend is needed.

import sys
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from streamlit.testing.v1 import AppTest

from frontend.models import Project

APP_PATH = str(Path(__file__).parent / "app.py")


def make_projects():
    return [
        Project(id=1, title="Alpha", featured=True),
        Project(id=2, title="Beta", technologies=["py"]),
    ]


def test_list_page_renders_without_errors():
    with patch("frontend.projects_state.fetch_projects", return_value=make_projects()):
        at = AppTest.from_file(APP_PATH, default_timeout=30).run()

    assert not at.exception
    assert at.button(key="project_create").label == "Create Project"
    assert at.button(key="card_edit_2").label == "Edit"
    assert at.session_state["nav_page"] == "Projects"


def test_table_view_renders_without_errors():
    with patch("frontend.projects_state.fetch_projects", return_value=make_projects()):
        at = AppTest.from_file(APP_PATH, default_timeout=30).run()
        at.checkbox(key="projects_table_view").check().run()

    assert not at.exception
    assert len(at.dataframe) == 1


def test_create_button_opens_form():
    with patch("frontend.projects_state.fetch_projects", return_value=make_projects()):
        at = AppTest.from_file(APP_PATH, default_timeout=30).run()
        at.button(key="project_create").click().run()

    assert not at.exception
    assert at.session_state["project_form"].is_open
