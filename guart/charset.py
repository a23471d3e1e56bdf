"""Box-drawing glyphs, terminal styles and indicator symbols."""


class Border:
    """Single-line box-drawing characters."""

    TOP_LEFT = "┌"
    TOP_RIGHT = "┐"
    LOWER_LEFT = "└"
    LOWER_RIGHT = "┘"
    HORIZONTAL = "─"
    HORIZONTAL_UP = "┬"
    HORIZONTAL_DOWN = "┴"
    VERTICAL = "│"
    VERTICAL_RIGHT = "┤"
    VERTICAL_LEFT = "├"
    CROSS = "┼"


class BoldBorder:
    """Double-line box-drawing characters."""

    TOP_LEFT = "╔"
    TOP_RIGHT = "╗"
    LOWER_LEFT = "╚"
    LOWER_RIGHT = "╝"
    HORIZONTAL = "═"
    HORIZONTAL_UP = "╦"
    HORIZONTAL_DOWN = "╩"
    VERTICAL = "║"
    VERTICAL_RIGHT = "╣"
    VERTICAL_LEFT = "╠"
    CROSS = "╬"


class Style:
    """Escape sequences that change how text is rendered."""

    REVERSE = "\x1b[7m"
    DIMMER = "\x1b[2m"
    NORMAL = "\x1b[m"


CHECK_BOX_CHECKED = "☒"
CHECK_BOX_UNCHECKED = "☐"
RADIO_BUTTON_CHECKED = "◉"
RADIO_BUTTON_UNCHECKED = "○"

WHITE_VERTICAL_RECTANGLE = "▯"
BLACK_VERTICAL_RECTANGLE = "▮"
BLACK_UP_POINTING_TRIANGLE = "▲"
BLACK_DOWN_POINTING_TRIANGLE = "▼"
BLACK_HORIZONTAL_RECTANGLE = "▬"