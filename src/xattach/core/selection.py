"""Selection state machine.

Pure menu logic with no terminal access. The engine in
``xattach.cli.ui.menu`` drives it:

    IDLE --begin--> RENDERING --rendered--> AWAITING_INPUT
    AWAITING_INPUT --nav key--> RENDERING (index changed)
    AWAITING_INPUT --clamped/ignored key--> AWAITING_INPUT
    AWAITING_INPUT --enter/cancel--> TERMINATED(outcome)
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Union

from xattach.core.keys import KeyCode, KeyEvent
from xattach.utils.constants import BLANK_MARKER, CANCEL_CHAR, HIGHLIGHT_MARKER
from xattach.utils.exceptions import SelectionStateError


@dataclass(frozen=True)
class Selected:
    """The user accepted an option."""

    option: str


@dataclass(frozen=True)
class Cancelled:
    """The user backed out with q or Escape."""


SelectionOutcome = Union[Selected, Cancelled]


class Phase(Enum):
    """Phases of one selection call."""

    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    RENDERING = "rendering"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class MenuState:
    """Menu state for a single selection call."""

    title: str
    options: tuple[str, ...]
    highlighted_index: int = 0
    phase: Phase = Phase.IDLE
    outcome: Optional[SelectionOutcome] = None

    @property
    def line_count(self) -> int:
        """Lines the menu occupies: title plus one per option."""
        return 1 + len(self.options)

    @property
    def highlighted(self) -> str:
        return self.options[self.highlighted_index]


def initial_state(title: str, options: Sequence[str]) -> MenuState:
    """Create the starting state. `options` must be non-empty."""
    if not options:
        raise SelectionStateError("cannot build a menu without options")
    return MenuState(title=title, options=tuple(options))


def begin(state: MenuState) -> MenuState:
    """Leave IDLE for the first render."""
    _expect(state, Phase.IDLE)
    return replace(state, phase=Phase.RENDERING)


def rendered(state: MenuState) -> MenuState:
    """Mark the current frame as drawn."""
    _expect(state, Phase.RENDERING)
    return replace(state, phase=Phase.AWAITING_INPUT)


def is_cancel(event: KeyEvent) -> bool:
    return event.code == KeyCode.ESCAPE or event.is_char(CANCEL_CHAR)


def transition(state: MenuState, event: KeyEvent) -> tuple[MenuState, bool]:
    """Apply one key event.

    Returns:
        Tuple of (new_state, render_needed)
    """
    _expect(state, Phase.AWAITING_INPUT)

    if event.code == KeyCode.UP:
        return _move(state, max(0, state.highlighted_index - 1))
    if event.code == KeyCode.DOWN:
        return _move(state, min(len(state.options) - 1, state.highlighted_index + 1))
    if event.code == KeyCode.ENTER:
        return _terminate(state, Selected(state.highlighted)), False
    if is_cancel(event):
        return _terminate(state, Cancelled()), False

    # Anything else, including modified keys, is ignored
    return state, False


def render_lines(state: MenuState) -> list[str]:
    """Lines for the current frame, title first."""
    lines = [state.title]
    for i, option in enumerate(state.options):
        marker = HIGHLIGHT_MARKER if i == state.highlighted_index else BLANK_MARKER
        lines.append(marker + option)
    return lines


def _move(state: MenuState, index: int) -> tuple[MenuState, bool]:
    if index == state.highlighted_index:
        return state, False
    return replace(state, highlighted_index=index, phase=Phase.RENDERING), True


def _terminate(state: MenuState, outcome: SelectionOutcome) -> MenuState:
    return replace(state, phase=Phase.TERMINATED, outcome=outcome)


def _expect(state: MenuState, phase: Phase) -> None:
    if state.phase is not phase:
        raise SelectionStateError(
            f"expected phase {phase.value}, menu is {state.phase.value}"
        )
