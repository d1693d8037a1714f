"""
Qt Application Entry Point

Owns the QApplication and the MainWindow for one run of the board.
"""
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from src.application.bootstrap import ServiceContainer
from src.utils.message import Log
from ui.qt_gui.design_system import get_stylesheet


class QtProjectBoardApp:
    """
    Qt front end of the project board.

    Usage:
        qt_app = QtProjectBoardApp()
        qt_app.initialize(container)
        exit_code = qt_app.run()
        qt_app.shutdown()
    """

    def __init__(self):
        self.app: Optional[QApplication] = None
        self.main_window = None
        self.container: Optional[ServiceContainer] = None

    def initialize(self, container: ServiceContainer, argv: Optional[List[str]] = None) -> None:
        """
        Create (or reuse) the QApplication and build the main window.

        Args:
            container: Services shared by every view
            argv: Command line for QApplication (sys.argv if None)
        """
        Log.info("Initializing Qt GUI")
        self.container = container

        self.app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
        self.app.setApplicationName("ProjectBoard")
        self.app.setOrganizationName("ProjectBoard")
        self.app.setStyle("Fusion")
        self.app.setStyleSheet(get_stylesheet())

        # Lazy import keeps widget modules out of headless imports of this module
        from ui.qt_gui.main_window import MainWindow
        self.main_window = MainWindow(container)

        Log.info("Qt GUI initialized successfully")

    def run(self) -> int:
        """
        Start the Qt event loop.

        Returns:
            Exit code
        """
        if not self.app or not self.main_window:
            Log.error("Qt application not initialized. Call initialize() first.")
            return 1

        self.main_window.show()
        self.main_window.raise_()
        self.main_window.activateWindow()

        Log.info("Starting Qt event loop")
        return self.app.exec()

    def shutdown(self) -> None:
        """Clean shutdown"""
        Log.info("Shutting down Qt GUI")
        if self.main_window:
            self.main_window.close()
        if self.container:
            self.container.cleanup()
