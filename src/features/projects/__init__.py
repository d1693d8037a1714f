"""
Projects feature module.

Usage:
    from src.features.projects.domain import Project, ProjectStatus
    from src.features.projects.application import ProjectStore, DragDropController
"""
# Only export domain by default - application via submodule
from src.features.projects.domain import (
    Project,
    ProjectStatus,
)

__all__ = [
    'Project',
    'ProjectStatus',
]
