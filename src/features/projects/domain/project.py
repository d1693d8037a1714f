"""
Project entity

A unit of work shown on the board: title, description, headcount and a
status that places it in the "active" or "finished" list.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
import uuid


class ProjectStatus(Enum):
    """Which list a project belongs to."""
    ACTIVE = "active"
    FINISHED = "finished"

    @property
    def display_name(self) -> str:
        return self.value.upper()


def new_project_id() -> str:
    """Default id factory: an opaque, unique string."""
    return str(uuid.uuid4())


@dataclass(eq=False)
class Project:
    """
    Project entity.

    id, title, description and people are fixed at creation. status is
    read-only from the outside; only ProjectStore moves a project between
    lists, through _apply_status().
    """
    id: str
    title: str
    description: str
    people: int
    _status: ProjectStatus = ProjectStatus.ACTIVE

    def __post_init__(self):
        if not self.id:
            object.__setattr__(self, "id", new_project_id())

    def __setattr__(self, name: str, value: Any) -> None:
        # Identity and content are write-once
        if name in ("id", "title", "description", "people") and name in self.__dict__:
            raise AttributeError(f"Project.{name} is immutable")
        super().__setattr__(name, value)

    @property
    def status(self) -> ProjectStatus:
        return self._status

    def _apply_status(self, new_status: ProjectStatus) -> None:
        """Store-only hook for status transitions."""
        self._status = new_status

    @property
    def persons_label(self) -> str:
        """Headcount as shown on the project card ("1 person", "3 persons")."""
        return "1 person" if self.people == 1 else f"{self.people} persons"

    def __repr__(self) -> str:
        return f"Project(id={self.id!r}, title={self.title!r}, people={self.people}, status={self._status.value})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/debugging"""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "people": self.people,
            "status": self._status.value,
        }
