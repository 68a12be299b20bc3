"""
YatzyBoard theme: colors, spacing, and typography constants.

Dark felt-table UI with a warm gold accent for totals and bonuses.
"""

# Primary
PRIMARY_GOLD = "#E8B923"      # Totals, earned bonus
PRIMARY_GREEN = "#0D7A3E"     # Add player, bonus reached
PRIMARY_RED = "#C41E2E"       # Remove player

# Surfaces
SURFACE_MAIN = "#16161F"      # Main window base
SURFACE_CARD = "#1C1C28"      # Table, player cards
SURFACE_ELEVATED = "#222230"  # Upper section rows, derived rows
SURFACE_TOOLBAR = "#12121A"   # Toolbar, status bar

# Borders
BORDER_SUBTLE = "#2A2A38"
BORDER_DEFAULT = "#3A3A4C"

# Text
TEXT_PRIMARY = "#F0F0F5"
TEXT_SECONDARY = "#A8A8B8"
TEXT_MUTED = "#6A6A7A"

# Spacing scale (px)
SPACING_SM = 8

# Border radius (px)
RADIUS_SM = 6
RADIUS_MD = 10

# Font families
FONT_UI = '"Segoe UI", "SF Pro Display", "Ubuntu", sans-serif'


def application_stylesheet() -> str:
    """Base stylesheet applied to the whole application."""
    return f"""
        QMainWindow, QWidget {{
            background-color: {SURFACE_MAIN};
            color: {TEXT_PRIMARY};
            font-family: {FONT_UI};
        }}
        QToolBar, QStatusBar {{
            background-color: {SURFACE_TOOLBAR};
            border: none;
        }}
        QTableWidget {{
            background-color: {SURFACE_CARD};
            gridline-color: {BORDER_SUBTLE};
            border: 1px solid {BORDER_DEFAULT};
            border-radius: {RADIUS_MD}px;
        }}
        QHeaderView::section {{
            background-color: {SURFACE_ELEVATED};
            color: {TEXT_SECONDARY};
            border: none;
            padding: {SPACING_SM}px;
        }}
        QLineEdit, QComboBox {{
            background-color: {SURFACE_CARD};
            border: 1px solid {BORDER_DEFAULT};
            border-radius: {RADIUS_SM}px;
            padding: 4px {SPACING_SM}px;
        }}
    """
