"""
frontend/models.py
Project record model and the explicit form state used by the Projects page.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

ProjectId = Union[int, str]


class Project(BaseModel):
    """
    A portfolio project as returned by GET /api/projects.

    The API speaks camelCase (imageUrl); both the wire name and the
    python name are accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: ProjectId
    title: str = ""
    description: str = ""
    image_url: Optional[str] = Field(None, alias="imageUrl")
    technologies: List[str] = Field(default_factory=list)
    featured: bool = False

    @field_validator("title", "description", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("image_url", mode="before")
    @classmethod
    def blank_image_to_none(cls, v):
        """Empty strings mean "no image" to the renderer."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("technologies", mode="before")
    @classmethod
    def coerce_technologies(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"technologies must be a list, got {type(v).__name__}")
        return [str(t) for t in v]

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation (camelCase keys)."""
        return self.model_dump(by_alias=True)


class FormMode(str, Enum):
    closed = "closed"
    creating = "creating"
    editing = "editing"


@dataclass(frozen=True)
class FormState:
    """
    Closed | CreatingNew | Editing(project).

    Only one form is open at a time; opening the form for another
    project replaces the current state.
    """

    mode: FormMode = FormMode.closed
    project: Optional[Project] = None

    @classmethod
    def closed(cls) -> "FormState":
        return cls(FormMode.closed)

    @classmethod
    def creating(cls) -> "FormState":
        return cls(FormMode.creating)

    @classmethod
    def editing(cls, project: Project) -> "FormState":
        return cls(FormMode.editing, project)

    @property
    def is_open(self) -> bool:
        return self.mode != FormMode.closed

    @property
    def is_editing(self) -> bool:
        return self.mode == FormMode.editing
