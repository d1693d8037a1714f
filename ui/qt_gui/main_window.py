"""
Main Window

The project board: the new-project form on top, the ACTIVE and FINISHED
lists side by side below it, and a status bar that reports board events.
"""
from typing import Dict

from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QVBoxLayout, QWidget

from src.application.bootstrap import ServiceContainer
from src.application.events import ProjectCreated, ProjectStatusChanged
from src.features.projects.domain.project import ProjectStatus
from src.utils.message import Log
from ui.qt_gui.design_system import Spacing
from ui.qt_gui.widgets import ProjectInputWidget, ProjectListWidget


class MainWindow(QMainWindow):
    """
    Board window.

    Every view receives the container's single ProjectStore and
    DragDropController, so a drop in one list updates both.
    """

    STATUS_MESSAGE_TIMEOUT_MS = 3000

    def __init__(self, container: ServiceContainer):
        super().__init__()
        self.container = container

        self.setWindowTitle("Project Board")
        self.resize(
            container.settings.get("window_width", 720),
            container.settings.get("window_height", 640),
        )

        self.project_lists: Dict[ProjectStatus, ProjectListWidget] = {}

        self._create_central()
        self._create_status_bar()
        self._subscribe_to_events()

        Log.info("Main window created")

    def _create_central(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(Spacing.MD, Spacing.MD, Spacing.MD, Spacing.MD)
        layout.setSpacing(Spacing.MD)

        self.input_widget = ProjectInputWidget(self.container.project_store, self.container.form_rules)
        layout.addWidget(self.input_widget)

        lists_row = QHBoxLayout()
        lists_row.setSpacing(Spacing.MD)
        for status in (ProjectStatus.ACTIVE, ProjectStatus.FINISHED):
            project_list = ProjectListWidget(
                status,
                self.container.project_store,
                self.container.drag_controller,
            )
            self.project_lists[status] = project_list
            lists_row.addWidget(project_list, 1)
        layout.addLayout(lists_row, 1)

        self.setCentralWidget(central)

    def _create_status_bar(self):
        self.statusBar().showMessage("Ready")

    # ==================== Events ====================

    def _subscribe_to_events(self):
        event_bus = self.container.event_bus
        event_bus.subscribe(ProjectCreated.name, self._on_project_created)
        event_bus.subscribe(ProjectStatusChanged.name, self._on_project_status_changed)

    def _unsubscribe_from_events(self):
        event_bus = self.container.event_bus
        event_bus.unsubscribe(ProjectCreated.name, self._on_project_created)
        event_bus.unsubscribe(ProjectStatusChanged.name, self._on_project_status_changed)

    def _on_project_created(self, event: ProjectCreated):
        title = event.data.get("project", {}).get("title", "")
        self.statusBar().showMessage(f"Project '{title}' added", self.STATUS_MESSAGE_TIMEOUT_MS)

    def _on_project_status_changed(self, event: ProjectStatusChanged):
        title = event.data.get("title", "")
        new_status = event.data.get("new_status", "")
        self.statusBar().showMessage(f"Project '{title}' moved to {new_status}", self.STATUS_MESSAGE_TIMEOUT_MS)

    def closeEvent(self, event):
        Log.info("Closing main window...")
        self._unsubscribe_from_events()
        for project_list in self.project_lists.values():
            project_list.dispose()
        event.accept()
