"""Custom exceptions for xattach.

This module defines a hierarchy of exceptions for different error types:
- XattachError: Base exception for all xattach errors
- TerminalError: Terminal device errors
- TerminalUnavailable: Raw mode, cursor or position query failures
- InputReadFailure: Reading the next key event failed
- SelectionStateError: Selection state machine misuse
- DisplayCommandError: xrandr invocation errors
"""


class XattachError(Exception):
    """Base exception for all xattach errors.

    All xattach-specific exceptions inherit from this class, allowing
    callers to catch all xattach errors with a single except clause.
    """

    pass


class TerminalError(XattachError):
    """Base exception for terminal device errors.

    Fatal to the current selection; the terminal session is still
    released before the error reaches the caller.
    """

    pass


class TerminalUnavailable(TerminalError):
    """No controllable terminal, or a platform call failed.

    Raised when:
    - stdin/stdout is not a tty
    - Switching raw mode on or off fails
    - Hiding/showing or moving the cursor fails
    - The cursor position reply never arrives
    """

    pass


class InputReadFailure(TerminalError):
    """Reading the next key event failed."""

    pass


class SelectionStateError(XattachError):
    """Selection state machine used out of order.

    Raised when a transition is requested in a phase that does not
    accept input.
    """

    pass


class DisplayCommandError(XattachError):
    """xrandr related errors.

    Raised when the xrandr binary is missing or an attach
    position is not recognized.
    """

    pass
