"""POSIX tty implementation of TerminalDevice.

Raw mode via termios, output via VT100 escape sequences, input decoded
with xattach.core.keys.
"""

import codecs
import os
import re
import select
import sys
import time
from collections import deque
from typing import Optional

from xattach.core.keys import KeyEvent, decode_keys
from xattach.utils.constants import CURSOR_QUERY_TIMEOUT, ESCAPE_TIMEOUT
from xattach.utils.debug import debug_terminal
from xattach.utils.exceptions import InputReadFailure, TerminalUnavailable

_IS_WINDOWS = os.name == "nt"

if not _IS_WINDOWS:
    import termios

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_LINE = "\033[2K"
QUERY_CURSOR = "\033[6n"

_CURSOR_REPLY_RE = re.compile(r"\x1b\[(\d+);(\d+)R")


def _move(column: int, row: int) -> str:
    # VT100 rows/columns are 1-based
    return f"\033[{row + 1};{column + 1}H"


class TtyTerminal:
    """Terminal device backed by file descriptors (stdin/stdout by default)."""

    def __init__(self, fd_in: Optional[int] = None, fd_out: Optional[int] = None):
        try:
            self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
            self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        except (AttributeError, ValueError) as e:
            # Replaced or closed std streams (io.UnsupportedOperation is a ValueError)
            raise TerminalUnavailable(f"no terminal file descriptor: {e}") from e
        self._saved_attrs = None
        self._decoder = codecs.getincrementaldecoder("utf-8")("replace")
        self._pending = ""
        self._events: deque[KeyEvent] = deque()

    # --- raw mode ---

    def enable_raw_mode(self) -> None:
        if _IS_WINDOWS:
            raise TerminalUnavailable("raw mode requires a POSIX terminal")
        if not (os.isatty(self.fd_in) and os.isatty(self.fd_out)):
            raise TerminalUnavailable("stdin/stdout is not a terminal")
        try:
            saved = termios.tcgetattr(self.fd_in)
            new = termios.tcgetattr(self.fd_in)
            # IFLAG: no CR->NL translation, no flow control
            new[0] &= ~(
                termios.ICRNL | termios.INLCR | termios.IGNCR | termios.IXON | termios.IXOFF
            )
            # LFLAG: no line buffering, echo or signal keys
            new[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN | termios.ISIG)
            new[6][termios.VMIN] = 1
            new[6][termios.VTIME] = 0
            termios.tcsetattr(self.fd_in, termios.TCSANOW, new)
        except termios.error as e:
            raise TerminalUnavailable(f"failed to enable raw mode: {e}") from e
        self._saved_attrs = saved
        debug_terminal("raw mode on", fd=self.fd_in)

    def disable_raw_mode(self) -> None:
        if not self.raw:
            return
        try:
            termios.tcsetattr(self.fd_in, termios.TCSANOW, self._saved_attrs)
        except termios.error as e:
            raise TerminalUnavailable(f"failed to disable raw mode: {e}") from e
        self._saved_attrs = None
        debug_terminal("raw mode off", fd=self.fd_in)

    @property
    def raw(self) -> bool:
        return self._saved_attrs is not None

    # --- output ---

    def hide_cursor(self) -> None:
        self._write_now(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._write_now(SHOW_CURSOR)

    def move_to(self, column: int, row: int) -> None:
        self.write(_move(column, row))

    def clear_line(self) -> None:
        self.write(CLEAR_LINE)

    def write(self, text: str) -> None:
        data = text.encode("utf-8")
        try:
            while data:
                written = os.write(self.fd_out, data)
                data = data[written:]
        except OSError as e:
            raise TerminalUnavailable(f"failed to write to terminal: {e}") from e

    def flush(self) -> None:
        # Writes go straight to the fd, nothing is buffered here
        pass

    def _write_now(self, text: str) -> None:
        self.write(text)
        self.flush()

    # --- input ---

    def cursor_position(self) -> tuple[int, int]:
        """Ask the terminal where the cursor is (needs raw mode)."""
        self._write_now(QUERY_CURSOR)
        deadline = time.monotonic() + CURSOR_QUERY_TIMEOUT
        buf = ""
        while True:
            match = _CURSOR_REPLY_RE.search(buf)
            if match:
                # Keys typed before the reply arrived are kept for read_key()
                self._pending += buf[: match.start()] + buf[match.end() :]
                row, column = int(match.group(1)), int(match.group(2))
                debug_terminal("cursor position", column=column - 1, row=row - 1)
                return column - 1, row - 1

            remaining = deadline - time.monotonic()
            try:
                ready = remaining > 0 and self._wait_readable(remaining)
                chunk = self._read_chunk() if ready else None
            except InputReadFailure as e:
                self._pending += buf
                raise TerminalUnavailable(str(e)) from e
            if chunk is None:
                self._pending += buf
                raise TerminalUnavailable("terminal did not report cursor position")
            buf += chunk

    def read_key(self) -> KeyEvent:
        while not self._events:
            if not self._pending:
                self._pending += self._read_chunk()

            events, self._pending = decode_keys(self._pending)
            self._events.extend(events)

            # Lone ESC or partial sequence: give the rest a moment to arrive
            if not events and self._pending:
                if self._wait_readable(ESCAPE_TIMEOUT):
                    self._pending += self._read_chunk()
                else:
                    events, self._pending = decode_keys(self._pending, final=True)
                    self._events.extend(events)

        return self._events.popleft()

    def _wait_readable(self, timeout: float) -> bool:
        try:
            readable, _, _ = select.select([self.fd_in], [], [], timeout)
        except (OSError, ValueError) as e:
            raise InputReadFailure(f"failed to poll terminal input: {e}") from e
        return bool(readable)

    def _read_chunk(self) -> str:
        try:
            data = os.read(self.fd_in, 1024)
        except OSError as e:
            raise InputReadFailure(f"failed to read terminal input: {e}") from e
        if not data:
            raise InputReadFailure("terminal input closed")
        return self._decoder.decode(data)
