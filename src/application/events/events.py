"""
Domain Events

Events that represent significant occurrences on the board.
Used for loose coupling between the store and secondary UI (status bar, logs).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass
class DomainEvent:
    """Base class for all domain events"""
    name: ClassVar[str] = "DomainEvent"
    project_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ProjectCreated(DomainEvent):
    """
    Raised after a new project was added to the store and broadcast.

    Data fields:
        - project: Project.to_dict() of the new project
    """
    name: ClassVar[str] = "ProjectCreated"


@dataclass
class ProjectStatusChanged(DomainEvent):
    """
    Raised after a project moved between lists.

    Only published for real changes; ignored transitions publish nothing.

    Data fields:
        - title: Project title
        - old_status: previous ProjectStatus value ("active"/"finished")
        - new_status: new ProjectStatus value
    """
    name: ClassVar[str] = "ProjectStatusChanged"
