"""UI components for interactive CLI."""

from xattach.cli.ui.base import TerminalDevice
from xattach.cli.ui.guard import TerminalSession
from xattach.cli.ui.menu import SelectionMenu, select_option
from xattach.cli.ui.panels import console, layout_panel, print_error

__all__ = [
    "SelectionMenu",
    "TerminalDevice",
    "TerminalSession",
    "console",
    "layout_panel",
    "print_error",
    "select_option",
]
