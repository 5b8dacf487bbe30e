"""Interactive single-choice menu drawn in place at the cursor."""

from typing import Optional, Sequence

from xattach.cli.ui.base import TerminalDevice
from xattach.cli.ui.guard import TerminalSession
from xattach.core import selection
from xattach.core.selection import MenuState, Phase, SelectionOutcome
from xattach.utils.debug import debug_menu


def clear_area(terminal: TerminalDevice, anchor: tuple[int, int], num_lines: int) -> None:
    """Blank `num_lines` lines from the anchor row and park the cursor there."""
    _, row = anchor
    for i in range(num_lines):
        terminal.move_to(0, row + i)
        terminal.clear_line()
    terminal.move_to(0, row)
    terminal.flush()


def draw_menu(terminal: TerminalDevice, anchor: tuple[int, int], state: MenuState) -> None:
    """Write the title and options, one per line, starting at the anchor row."""
    _, row = anchor
    for i, line in enumerate(selection.render_lines(state)):
        terminal.move_to(0, row + i)
        terminal.write(line)
    terminal.flush()


class SelectionMenu:
    """Runs the render/input loop for one selection.

    Args:
        terminal: Device to draw on and read keys from
    """

    def __init__(self, terminal: TerminalDevice):
        self.terminal = terminal

    def run(self, title: str, options: Sequence[str]) -> Optional[SelectionOutcome]:
        """Show the menu and block until the user accepts or cancels.

        Returns:
            Selected or Cancelled, or None when there are no options

        Raises:
            TerminalUnavailable: terminal could not be set up or drawn on
            InputReadFailure: reading a key failed
        """
        if not options:
            return None

        state = selection.initial_state(title, options)
        with TerminalSession(self.terminal):
            anchor = self.terminal.cursor_position()
            debug_menu("start", title=title, options=len(state.options), anchor=anchor)
            state = self._render(anchor, selection.begin(state))

            while state.phase is not Phase.TERMINATED:
                event = self.terminal.read_key()
                state, render_needed = selection.transition(state, event)
                if render_needed:
                    state = self._render(anchor, state)

            clear_area(self.terminal, anchor, state.line_count)

        debug_menu("done", outcome=state.outcome)
        return state.outcome

    def _render(self, anchor: tuple[int, int], state: MenuState) -> MenuState:
        clear_area(self.terminal, anchor, state.line_count)
        draw_menu(self.terminal, anchor, state)
        return selection.rendered(state)


def select_option(
    title: str,
    options: Sequence[str],
    terminal: Optional[TerminalDevice] = None,
) -> Optional[SelectionOutcome]:
    """Let the user pick one of `options` with the arrow keys.

    Enter selects, q or Escape cancels. An empty list returns None
    without touching the terminal.
    """
    if not options:
        return None
    if terminal is None:
        from xattach.cli.ui.terminal import TtyTerminal

        terminal = TtyTerminal()
    return SelectionMenu(terminal).run(title, options)
