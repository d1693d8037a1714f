"""
Domain layer for projects feature.

Contains:
- Project entity
- ProjectStatus enum
"""
from src.features.projects.domain.project import Project, ProjectStatus, new_project_id

__all__ = [
    'Project',
    'ProjectStatus',
    'new_project_id',
]
