"""Core selection logic and display collaborators."""

from xattach.core.keys import KeyCode, KeyEvent, decode_keys
from xattach.core.selection import (
    Cancelled,
    MenuState,
    Phase,
    Selected,
    SelectionOutcome,
    transition,
)

__all__ = [
    "Cancelled",
    "KeyCode",
    "KeyEvent",
    "MenuState",
    "Phase",
    "Selected",
    "SelectionOutcome",
    "decode_keys",
    "transition",
]
