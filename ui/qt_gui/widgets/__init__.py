"""
Board widgets.

The input form, the two status lists and the project cards inside them.
"""
from ui.qt_gui.widgets.project_input_widget import ProjectInputWidget
from ui.qt_gui.widgets.project_item_widget import ProjectItemWidget
from ui.qt_gui.widgets.project_list_widget import ProjectListWidget

__all__ = [
    'ProjectInputWidget',
    'ProjectItemWidget',
    'ProjectListWidget',
]
