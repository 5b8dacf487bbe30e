"""Terminal session guard: raw mode and hidden cursor for one selection."""

from xattach.cli.ui.base import TerminalDevice
from xattach.utils.debug import debug_terminal
from xattach.utils.exceptions import TerminalError, TerminalUnavailable


class TerminalSession:
    """Owns raw mode and cursor visibility while active.

    Use as a context manager; the terminal is restored on every exit
    path, including exceptions and KeyboardInterrupt:

        with TerminalSession(terminal):
            ...
    """

    def __init__(self, terminal: TerminalDevice):
        self.terminal = terminal
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def acquire(self) -> None:
        """Enable raw mode and hide the cursor.

        Raises:
            TerminalUnavailable: if either step fails. A half-done
                acquisition is rolled back first.
        """
        if self.active:
            return
        self.terminal.enable_raw_mode()
        try:
            self.terminal.hide_cursor()
            self.terminal.flush()
        except TerminalError:
            self.terminal.disable_raw_mode()
            raise
        self._active = True
        debug_terminal("session acquired")

    def release(self) -> None:
        """Show the cursor and leave raw mode. Safe to call twice."""
        if not self.active:
            return
        self._active = False

        first_error = None
        try:
            self.terminal.show_cursor()
            self.terminal.flush()
        except TerminalError as e:
            first_error = e
        try:
            self.terminal.disable_raw_mode()
        except TerminalError as e:
            first_error = first_error or e

        debug_terminal("session released", error=first_error)
        if first_error is not None:
            raise TerminalUnavailable(
                f"failed to restore terminal: {first_error}"
            ) from first_error

    def __enter__(self) -> "TerminalSession":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.release()
            return
        # Keep the original error; a restore failure is secondary
        try:
            self.release()
        except TerminalError as restore_error:
            debug_terminal("restore failed during error exit", error=restore_error)
