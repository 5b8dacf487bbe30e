"""xattach - Attach extra displays to the primary one with xrandr."""

from importlib.metadata import version

__version__ = version("xattach")

from xattach.cli.ui.menu import select_option
from xattach.core.selection import Cancelled, Selected

__all__ = [
    "Cancelled",
    "Selected",
    "select_option",
]
