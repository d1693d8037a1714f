"""
Project Input Widget

The "new project" form: title, description, people and an ADD PROJECT
button. Valid input creates a project in the ProjectStore; invalid input
is rejected with a warning and leaves the fields as typed.
"""
from typing import Optional, Tuple

from PyQt6.QtWidgets import (
    QFormLayout, QHBoxLayout, QLineEdit, QMessageBox, QPushButton, QTextEdit, QVBoxLayout, QWidget
)
from PyQt6.QtCore import pyqtSignal

from src.features.projects.application.project_form import (
    ProjectFormInput, ProjectFormRules, validate_project_input
)
from src.features.projects.application.project_store import ProjectStore
from src.features.projects.domain.project import Project
from src.shared.application.validation import ValidationResult
from src.utils.message import Log
from ui.qt_gui.design_system import Spacing


class ProjectInputWidget(QWidget):
    """Form that adds projects to the store."""

    # Emitted with the new project's id after a successful submit
    project_added = pyqtSignal(str)

    def __init__(self, store: ProjectStore, rules: Optional[ProjectFormRules] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._store = store
        self._rules = rules or ProjectFormRules()
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(Spacing.MD, Spacing.MD, Spacing.MD, Spacing.MD)
        layout.setSpacing(Spacing.SM)

        form = QFormLayout()
        form.setSpacing(Spacing.SM)

        self.title_input = QLineEdit()
        self.title_input.setObjectName("title")
        self.title_input.returnPressed.connect(self.submit_handler)
        form.addRow("Title", self.title_input)

        self.description_input = QTextEdit()
        self.description_input.setObjectName("description")
        self.description_input.setAcceptRichText(False)
        self.description_input.setFixedHeight(64)
        form.addRow("Description", self.description_input)

        self.people_input = QLineEdit()
        self.people_input.setObjectName("people")
        self.people_input.setPlaceholderText("1 - 5")
        self.people_input.returnPressed.connect(self.submit_handler)
        form.addRow("People", self.people_input)

        layout.addLayout(form)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.submit_button = QPushButton("ADD PROJECT")
        self.submit_button.clicked.connect(self.submit_handler)
        button_row.addWidget(self.submit_button)
        layout.addLayout(button_row)

    def gather_user_input(self) -> Optional[Tuple[str, str, int]]:
        """
        Read and validate the fields.

        Returns:
            (title, description, people) or None if the input was rejected
        """
        form_input = ProjectFormInput(
            title=self.title_input.text(),
            description=self.description_input.toPlainText(),
            people=self.people_input.text(),
        )
        result, values = validate_project_input(form_input, self._rules)
        if values is None:
            Log.warning(f"ProjectInputWidget: Invalid input: {'; '.join(result.errors)}")
            self.show_invalid_input(result)
            return None
        return values

    def show_invalid_input(self, result: ValidationResult) -> None:
        QMessageBox.warning(self, "Invalid input", "Invalid input, please try again!")

    def clear_inputs(self) -> None:
        self.title_input.clear()
        self.description_input.clear()
        self.people_input.clear()

    def submit_handler(self) -> Optional[Project]:
        user_input = self.gather_user_input()
        if user_input is None:
            return None

        title, description, people = user_input
        project = self._store.create(title, description, people)
        self.clear_inputs()
        self.project_added.emit(project.id)
        return project
