"""
Application layer for projects feature.

Contains:
- ProjectStore - project collection and change broadcast
- DragDropController - drag lifecycle and drop-to-transition mapping
- project_form - validation rules for the new-project form
"""
from src.features.projects.application.project_store import ProjectStore, ProjectsListener
from src.features.projects.application.drag_drop import (
    DragDropController,
    DragEffect,
    DragPayload,
    DragSource,
    DragState,
    DropTarget,
    TEXT_PLAIN,
    accepts_payload,
)
from src.features.projects.application.project_form import (
    ProjectFormInput,
    ProjectFormRules,
    validate_project_input,
)

__all__ = [
    'ProjectStore',
    'ProjectsListener',
    'DragDropController',
    'DragEffect',
    'DragPayload',
    'DragSource',
    'DragState',
    'DropTarget',
    'TEXT_PLAIN',
    'accepts_payload',
    'ProjectFormInput',
    'ProjectFormRules',
    'validate_project_input',
]
