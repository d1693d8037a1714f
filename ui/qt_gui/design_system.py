"""
Design System

Centralized design tokens for the board UI.
Colors, spacing, typography and the global stylesheet.
"""
from PyQt6.QtGui import QColor, QFont


def border_radius(px: int = 4) -> str:
    return f"{px}px"


class Colors:
    """Color palette for the application"""

    # Background colors
    BG_DARK = QColor(28, 28, 32)
    BG_MEDIUM = QColor(42, 42, 47)
    BG_LIGHT = QColor(56, 56, 62)

    # UI element colors
    BORDER = QColor(75, 75, 80)

    # Text colors
    TEXT_PRIMARY = QColor(240, 240, 245)
    TEXT_SECONDARY = QColor(180, 180, 185)

    # Accent colors
    ACCENT_BLUE = QColor(70, 130, 220)
    ACCENT_GREEN = QColor(80, 180, 120)

    # Drop target highlight
    DROPPABLE_BG = QColor(45, 62, 88)


class Spacing:
    """Spacing constants"""
    XS = 4
    SM = 8
    MD = 16
    LG = 24


class Typography:
    """Font definitions"""

    @staticmethod
    def heading_font() -> QFont:
        font = QFont()
        font.setPixelSize(16)
        font.setWeight(QFont.Weight.DemiBold)
        return font

    @staticmethod
    def card_title_font() -> QFont:
        font = QFont()
        font.setPixelSize(14)
        font.setWeight(QFont.Weight.DemiBold)
        return font


def get_stylesheet() -> str:
    """
    Global stylesheet for the application.

    List containers carry a dynamic "droppable" property while a drag
    hovers over them; the rule at the bottom highlights them.
    """
    br = border_radius

    return f"""
    QMainWindow, QWidget {{
        background-color: {Colors.BG_DARK.name()};
        color: {Colors.TEXT_PRIMARY.name()};
        font-size: 13px;
    }}

    QLineEdit, QTextEdit {{
        background-color: {Colors.BG_MEDIUM.name()};
        border: 1px solid {Colors.BORDER.name()};
        border-radius: {br(4)};
        padding: 4px;
    }}
    QLineEdit:focus, QTextEdit:focus {{
        border: 1px solid {Colors.ACCENT_BLUE.name()};
    }}

    QPushButton {{
        background-color: {Colors.ACCENT_BLUE.name()};
        border: none;
        border-radius: {br(4)};
        padding: 6px 16px;
    }}
    QPushButton:hover {{
        background-color: {Colors.ACCENT_BLUE.lighter(115).name()};
    }}

    QFrame#projectCard {{
        background-color: {Colors.BG_LIGHT.name()};
        border: 1px solid {Colors.BORDER.name()};
        border-radius: {br(6)};
    }}
    QFrame#projectCard:hover {{
        border: 1px solid {Colors.TEXT_SECONDARY.name()};
    }}
    QLabel#projectCardMeta {{
        color: {Colors.TEXT_SECONDARY.name()};
    }}

    QFrame#projectList {{
        background-color: {Colors.BG_MEDIUM.name()};
        border: 1px solid {Colors.BORDER.name()};
        border-radius: {br(6)};
    }}
    QWidget[droppable="true"] {{
        background-color: {Colors.DROPPABLE_BG.name()};
    }}
    """
