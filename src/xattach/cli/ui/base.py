"""Base protocol for the terminal device used by menus."""

from typing import Protocol

from xattach.core.keys import KeyEvent


class TerminalDevice(Protocol):
    """Capabilities the selection menu needs from a terminal.

    Allows swapping the real tty for an in-memory fake in tests.
    Coordinates are zero-based (column, row).
    """

    def enable_raw_mode(self) -> None:
        """Deliver key presses immediately, without echo."""
        ...

    def disable_raw_mode(self) -> None:
        """Restore the mode saved by enable_raw_mode()."""
        ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def cursor_position(self) -> tuple[int, int]:
        """Return the current (column, row)."""
        ...

    def move_to(self, column: int, row: int) -> None: ...

    def clear_line(self) -> None:
        """Clear the whole line the cursor is on."""
        ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def read_key(self) -> KeyEvent:
        """Block until the next key press."""
        ...
