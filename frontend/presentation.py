"""
frontend/presentation.py
Pure rendering helpers for the Projects page.

Nothing here touches session state or the network: every function maps
projects (and their index within a partition) to data or HTML strings that
app.py hands to st.markdown(..., unsafe_allow_html=True).
"""

from __future__ import annotations

from html import escape
from typing import Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import pandas as pd

try:
    from frontend.config import MAX_LIST_TAGS
    from frontend.models import Project, ProjectId
except ModuleNotFoundError:
    from config import MAX_LIST_TAGS
    from models import Project, ProjectId

PLACEHOLDER_TEXT = "No Image"

# Truncation limits (characters)
FEATURED_DESCRIPTION_LIMIT = 280
CARD_TITLE_LIMIT = 60
CARD_DESCRIPTION_LIMIT = 140

# Entrance animation per layout: duration (s), stagger per index (s), slide offset (px)
ANIMATION = {
    "featured": {"duration": 0.7, "stagger": 0.12, "offset": 30},
    "card": {"duration": 0.6, "stagger": 0.08, "offset": 24},
}

PAGE_CSS = """
<style>
@keyframes project-rise-30 { from { opacity: 0; transform: translateY(30px); } to { opacity: 1; transform: none; } }
@keyframes project-rise-24 { from { opacity: 0; transform: translateY(24px); } to { opacity: 1; transform: none; } }

.projects-title { text-align: center; font-size: 3rem; font-weight: 800; margin-bottom: 1rem; }

.project-featured {
    display: grid; grid-template-columns: 1fr 1fr; gap: 2rem; padding: 1.5rem;
    border-radius: 1rem; border: 1px solid rgba(255,255,255,0.08);
    background: rgba(255,255,255,0.06); margin-bottom: 2rem; overflow: hidden;
    opacity: 0; animation-fill-mode: forwards; animation-timing-function: ease-out;
}
.project-featured:hover { transform: scale(1.01); transition: transform 0.3s; }

.project-card {
    border-radius: 0.75rem; border: 1px solid rgba(255,255,255,0.06);
    background: rgba(255,255,255,0.04); overflow: hidden; margin-bottom: 0.5rem;
    opacity: 0; animation-fill-mode: forwards; animation-timing-function: ease-out;
}
.project-card .project-body { padding: 1rem; }

.project-image { width: 100%; object-fit: cover; display: block; border-radius: 0.75rem; }
.project-placeholder {
    width: 100%; background: #1f2937; color: #6b7280; border-radius: 0.75rem;
    display: flex; align-items: center; justify-content: center;
}

.line-clamp-2 { display: -webkit-box; -webkit-line-clamp: 2; -webkit-box-orient: vertical; overflow: hidden; }
.line-clamp-3 { display: -webkit-box; -webkit-line-clamp: 3; -webkit-box-orient: vertical; overflow: hidden; }

.project-tags { display: flex; flex-wrap: wrap; gap: 0.5rem; margin: 0.75rem 0; }
.project-tag {
    padding: 0.25rem 0.75rem; border-radius: 9999px; font-size: 0.85rem; font-weight: 600;
    background: #1f77b4; color: white;
}
.project-view {
    display: inline-block; padding: 0.3rem 0.9rem; border: 1px solid currentColor;
    border-radius: 0.5rem; text-decoration: none;
}
</style>
"""


# --------------------------------------------------------------------
# Data helpers
# --------------------------------------------------------------------


def partition_projects(projects: Iterable[Project]) -> Tuple[List[Project], List[Project]]:
    """
    Split into (featured, standard), keeping the server order in each.

    Every project lands in exactly one of the two lists.
    """
    featured: List[Project] = []
    standard: List[Project] = []
    for project in projects:
        (featured if project.featured else standard).append(project)
    return featured, standard


def visible_technologies(project: Project, limit: int = MAX_LIST_TAGS) -> List[str]:
    return list(project.technologies[:limit])


def truncate_text(text: Optional[str], limit: int) -> str:
    """Cut text to at most `limit` characters, ending with an ellipsis when cut."""
    text = (text or "").strip()
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    return text[: max(limit - 1, 0)].rstrip() + "…"


def animation_delay(index: int, kind: str = "card") -> float:
    return round(index * ANIMATION[kind]["stagger"], 2)


def animation_style(index: int, kind: str = "card") -> str:
    """Inline CSS for the staggered entrance of the index-th item of a layout."""
    timing = ANIMATION[kind]
    return (
        f"animation-name: project-rise-{timing['offset']}; "
        f"animation-duration: {timing['duration']}s; "
        f"animation-delay: {animation_delay(index, kind)}s;"
    )


def detail_href(project_id: ProjectId) -> str:
    """Link target of the detail route (the page reads ?project=<id>)."""
    return f"?project={quote(str(project_id), safe='')}"


def projects_dataframe(projects: Iterable[Project]) -> pd.DataFrame:
    """Compact table view of the collection."""
    rows = [
        {
            "id": p.id,
            "title": p.title,
            "featured": p.featured,
            "technologies": ", ".join(p.technologies),
            "has_image": p.has_image,
        }
        for p in projects
    ]
    return pd.DataFrame(rows, columns=["id", "title", "featured", "technologies", "has_image"])


# --------------------------------------------------------------------
# HTML blocks
# --------------------------------------------------------------------


def render_image(project: Project, height: int) -> str:
    """Project image, or a fixed placeholder block when there is no imageUrl."""
    if project.has_image:
        return (
            f'<img class="project-image" src="{escape(project.image_url)}" '
            f'alt="{escape(project.title)}" style="height: {height}px;" />'
        )
    return (
        f'<div class="project-placeholder" style="height: {height}px;">'
        f"{PLACEHOLDER_TEXT}</div>"
    )


def render_tags(technologies: List[str]) -> str:
    if not technologies:
        return ""
    tags = "".join(f'<span class="project-tag">{escape(t)}</span>' for t in technologies)
    return f'<div class="project-tags">{tags}</div>'


def render_view_link(project: Project) -> str:
    return f'<a class="project-view" href="{detail_href(project.id)}" target="_self">View</a>'


def render_featured_block(project: Project, index: int) -> str:
    """Full-width feature block: image on one side, summary on the other."""
    return (
        f'<article class="project-featured" style="{animation_style(index, "featured")}">'
        f'<a href="{detail_href(project.id)}" target="_self">{render_image(project, 288)}</a>'
        f"<div>"
        f"<h2>{escape(project.title)}</h2>"
        f'<p class="line-clamp-3">{escape(truncate_text(project.description, FEATURED_DESCRIPTION_LIMIT))}</p>'
        f"{render_tags(visible_technologies(project))}"
        f"{render_view_link(project)}"
        f"</div>"
        f"</article>"
    )


def render_project_card(project: Project, index: int) -> str:
    """Grid card; the Edit/Delete buttons are Streamlit widgets rendered under it."""
    return (
        f'<div class="project-card" style="{animation_style(index, "card")}">'
        f'<a href="{detail_href(project.id)}" target="_self">{render_image(project, 192)}</a>'
        f'<div class="project-body">'
        f"<h3>{escape(truncate_text(project.title, CARD_TITLE_LIMIT))}</h3>"
        f'<p class="line-clamp-2">{escape(truncate_text(project.description, CARD_DESCRIPTION_LIMIT))}</p>'
        f"{render_tags(visible_technologies(project))}"
        f"{render_view_link(project)}"
        f"</div>"
        f"</div>"
    )


def render_project_detail(project: Project) -> str:
    """Detail view: full description and every technology."""
    return (
        f'<article class="project-featured" style="{animation_style(0, "featured")}">'
        f"{render_image(project, 360)}"
        f"<div>"
        f"<h2>{escape(project.title)}</h2>"
        f"<p>{escape(project.description)}</p>"
        f"{render_tags(list(project.technologies))}"
        f"</div>"
        f"</article>"
    )


def grid_rows(items: List[Project], columns: int = 3) -> List[List[Project]]:
    """Chunk the standard partition into rows for st.columns."""
    return [items[i : i + columns] for i in range(0, len(items), columns)]


def partition_counts(projects: Iterable[Project]) -> Dict[str, int]:
    featured, standard = partition_projects(projects)
    return {"featured": len(featured), "standard": len(standard)}
