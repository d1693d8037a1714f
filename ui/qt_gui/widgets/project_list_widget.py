"""
Project List Widget

Shows the projects of one status ("active" or "finished") and accepts
dropped project cards, moving them to that status.

Subscribes to the ProjectStore on construction and rebuilds its cards
from scratch on every broadcast.
"""
from typing import List, Optional

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget
from PyQt6.QtGui import QDragEnterEvent, QDragLeaveEvent, QDragMoveEvent, QDropEvent

from src.features.projects.application.drag_drop import DragDropController
from src.features.projects.application.project_store import ProjectStore
from src.features.projects.domain.project import Project, ProjectStatus
from src.utils.message import Log
from ui.qt_gui.design_system import Spacing, Typography
from ui.qt_gui.widgets.project_item_widget import ProjectItemWidget


class ProjectListWidget(QFrame):
    """
    Drop target for one ProjectStatus.

    The target status is fixed per instance, so the same drop handler is
    correct for both lists whichever list the card came from.

    Usage:
        active = ProjectListWidget(ProjectStatus.ACTIVE, store, drag_controller)
        finished = ProjectListWidget(ProjectStatus.FINISHED, store, drag_controller)
    """

    def __init__(
        self,
        status: ProjectStatus,
        store: ProjectStore,
        drag_controller: DragDropController,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._status = status
        self._store = store
        self._drag_controller = drag_controller
        self.assigned_projects: List[Project] = []
        self._item_widgets: List[ProjectItemWidget] = []

        self.setObjectName("projectList")
        self.setAcceptDrops(True)
        self._setup_ui()

        self._drag_controller.register_target(self)
        self._store.subscribe(self._on_projects_changed)
        self._on_projects_changed(self._store.snapshot())

    @property
    def target_status(self) -> ProjectStatus:
        return self._status

    @property
    def item_widgets(self) -> List[ProjectItemWidget]:
        return self._item_widgets.copy()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(Spacing.MD, Spacing.MD, Spacing.MD, Spacing.MD)
        layout.setSpacing(Spacing.SM)

        self.heading_label = QLabel(f"{self._status.display_name} PROJECTS")
        self.heading_label.setFont(Typography.heading_font())
        layout.addWidget(self.heading_label)

        # Container for the cards; carries the "droppable" highlight
        self.list_container = QWidget()
        self.list_container.setObjectName(f"{self._status.value}-projects-list")
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(Spacing.SM)
        self.list_layout.addStretch()
        layout.addWidget(self.list_container, 1)

    # -------------------------------------------------------------------------
    # Store subscription
    # -------------------------------------------------------------------------

    def _on_projects_changed(self, projects: List[Project]):
        self.assigned_projects = [p for p in projects if p.status == self._status]
        self._render_projects()

    def _render_projects(self):
        """Clear and rebuild all cards in store order."""
        for widget in self._item_widgets:
            self.list_layout.removeWidget(widget)
            widget.hide()
            # Deferred: the card being dragged may still be inside QDrag.exec()
            widget.deleteLater()
        self._item_widgets = []

        for project in self.assigned_projects:
            item = ProjectItemWidget(project, self._drag_controller, parent=self.list_container)
            # Keep the stretch last
            self.list_layout.insertWidget(self.list_layout.count() - 1, item)
            self._item_widgets.append(item)

    # -------------------------------------------------------------------------
    # Drop target
    # -------------------------------------------------------------------------

    def set_droppable(self, droppable: bool) -> None:
        if self.is_droppable() == droppable:
            return
        self.list_container.setProperty("droppable", droppable)
        # Re-evaluate [droppable="true"] style rules
        style = self.list_container.style()
        style.unpolish(self.list_container)
        style.polish(self.list_container)

    def is_droppable(self) -> bool:
        return bool(self.list_container.property("droppable"))

    def _handle_drag_over(self, event):
        types = list(event.mimeData().formats())
        if self._drag_controller.drag_over(self, types):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragEnterEvent(self, event: QDragEnterEvent):
        self._handle_drag_over(event)

    def dragMoveEvent(self, event: QDragMoveEvent):
        self._handle_drag_over(event)

    def dragLeaveEvent(self, event: QDragLeaveEvent):
        self._drag_controller.drag_leave(self)
        event.accept()

    def dropEvent(self, event: QDropEvent):
        project_id = event.mimeData().text()
        moved = self._drag_controller.drop(self, project_id)
        if moved:
            Log.info(f"ProjectListWidget: Project '{project_id}' dropped on {self._status.value} list")
        event.acceptProposedAction()

    def dispose(self) -> None:
        """Stop listening to the store and drag controller."""
        self._store.unsubscribe(self._on_projects_changed)
        self._drag_controller.unregister_target(self)
