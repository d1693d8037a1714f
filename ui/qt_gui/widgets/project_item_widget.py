"""
Project Item Widget

One project card inside a ProjectListWidget. Cards are drag sources:
picking one up attaches the project id as text/plain and allows a move.
"""
from typing import Optional

from PyQt6.QtWidgets import QApplication, QFrame, QLabel, QVBoxLayout, QWidget
from PyQt6.QtCore import QMimeData, QPoint, Qt
from PyQt6.QtGui import QDrag, QMouseEvent

from src.features.projects.application.drag_drop import DragDropController, DragEffect, DragPayload
from src.features.projects.domain.project import Project
from ui.qt_gui.design_system import Spacing, Typography


# DragEffect -> Qt drop action offered to the platform
_QT_DROP_ACTIONS = {
    DragEffect.MOVE: Qt.DropAction.MoveAction,
}


class ProjectItemWidget(QFrame):
    """
    Card showing title, headcount and description of a project.

    The card never changes the project itself; a drop on a list does,
    through the DragDropController.
    """

    def __init__(self, project: Project, drag_controller: DragDropController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.project = project
        self._drag_controller = drag_controller
        self._drag_start_pos: Optional[QPoint] = None

        self.setObjectName("projectCard")
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self._setup_ui()

    @property
    def project_id(self) -> str:
        return self.project.id

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(Spacing.SM, Spacing.SM, Spacing.SM, Spacing.SM)
        layout.setSpacing(Spacing.XS)

        self.title_label = QLabel(self.project.title)
        self.title_label.setFont(Typography.card_title_font())

        self.people_label = QLabel(f"{self.project.persons_label} assigned")
        self.people_label.setObjectName("projectCardMeta")

        self.description_label = QLabel(self.project.description)
        self.description_label.setWordWrap(True)

        layout.addWidget(self.title_label)
        layout.addWidget(self.people_label)
        layout.addWidget(self.description_label)

    # -------------------------------------------------------------------------
    # Drag source
    # -------------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_start_pos = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._drag_start_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return
        distance = (event.position().toPoint() - self._drag_start_pos).manhattanLength()
        if distance < QApplication.startDragDistance():
            return
        self.start_drag()

    def mouseReleaseEvent(self, event: QMouseEvent):
        self._drag_start_pos = None
        super().mouseReleaseEvent(event)

    def create_mime_data(self, payload: DragPayload) -> QMimeData:
        """Copy the payload into a QMimeData (only text/plain is ever written)."""
        mime = QMimeData()
        mime.setText(payload.text)
        return mime

    def start_drag(self) -> Qt.DropAction:
        """
        Run a platform drag for this card.

        QDrag.exec() blocks until the drop (or cancel). A drop may rebuild
        the lists; old cards are removed with deleteLater(), so this
        widget is still alive when exec() returns.
        """
        payload = self._drag_controller.drag_start(self)

        drag = QDrag(self)
        drag.setMimeData(self.create_mime_data(payload))
        drag.setPixmap(self.grab())
        drag.setHotSpot(self._drag_start_pos or QPoint(0, 0))

        try:
            return drag.exec(_QT_DROP_ACTIONS[payload.effect_allowed])
        finally:
            self.drag_end_handler()

    def drag_end_handler(self):
        """Back to idle: clear the drop highlight on every list."""
        self._drag_start_pos = None
        self._drag_controller.drag_end()
