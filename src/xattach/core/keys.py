"""Key event model and raw input decoding."""

import re
from dataclasses import dataclass

import readchar

# Sequences beginning with ESC that carry a full key, e.g. ESC [ 1 ; 5 A
_CSI_RE = re.compile(r"\x1b\[[0-9;?]*[@-~]")
_SS3_RE = re.compile(r"\x1bO[@-~]")

_UP_SEQUENCES = (readchar.key.UP, "\x1bOA")
_DOWN_SEQUENCES = (readchar.key.DOWN, "\x1bOB")
_ENTER_CHARS = (readchar.key.ENTER, readchar.key.CR, readchar.key.LF)


class KeyCode:
    """Key code constants."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    CHAR = "char"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press.

    `char` is set for CHAR events (the base letter for Ctrl/Alt combos).
    """

    code: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False

    @property
    def has_modifiers(self) -> bool:
        return self.ctrl or self.alt

    def is_char(self, char: str) -> bool:
        """True for a bare (unmodified) press of `char`."""
        return self.code == KeyCode.CHAR and self.char == char and not self.has_modifiers


def _decode_escape(text: str) -> tuple[KeyEvent, int]:
    """Decode one key starting at an ESC. Returns (event, chars consumed)."""
    for seq in _UP_SEQUENCES:
        if text.startswith(seq):
            return KeyEvent(KeyCode.UP), len(seq)
    for seq in _DOWN_SEQUENCES:
        if text.startswith(seq):
            return KeyEvent(KeyCode.DOWN), len(seq)

    match = _CSI_RE.match(text) or _SS3_RE.match(text)
    if match:
        return KeyEvent(KeyCode.OTHER), match.end()

    if len(text) == 1:
        return KeyEvent(KeyCode.ESCAPE), 1

    nxt = text[1]
    if nxt == readchar.key.ESC:
        return KeyEvent(KeyCode.ESCAPE), 1
    if nxt.isprintable():
        return KeyEvent(KeyCode.CHAR, char=nxt, alt=True), 2
    # Alt + control char, or an unfinished sequence we don't know
    return KeyEvent(KeyCode.OTHER, alt=True), 2


def _decode_char(ch: str) -> KeyEvent:
    if ch in _ENTER_CHARS:
        return KeyEvent(KeyCode.ENTER)
    code = ord(ch)
    if 1 <= code <= 26:
        # Ctrl-A .. Ctrl-Z
        return KeyEvent(KeyCode.CHAR, char=chr(code + 96), ctrl=True)
    if ch.isprintable():
        return KeyEvent(KeyCode.CHAR, char=ch)
    return KeyEvent(KeyCode.OTHER)


def decode_keys(text: str, final: bool = False) -> tuple[list[KeyEvent], str]:
    """Split raw terminal input into key events.

    A trailing ESC, or a trailing ESC [ / ESC O prefix, is returned as the
    remainder so the caller can wait for the rest of the sequence. Pass
    `final=True` once no more input is coming to flush it as keys.

    Returns:
        Tuple of (events, remainder)
    """
    events: list[KeyEvent] = []
    pos = 0
    while pos < len(text):
        rest = text[pos:]
        if rest[0] != readchar.key.ESC:
            events.append(_decode_char(rest[0]))
            pos += 1
            continue

        incomplete = rest in (readchar.key.ESC, "\x1b[", "\x1bO") or (
            rest.startswith("\x1b[") and not _CSI_RE.match(rest)
        )
        if incomplete and not final:
            break
        if incomplete and rest.startswith("\x1b[") and len(rest) > 2:
            # Truncated CSI: drop it whole rather than leak its bytes as chars
            events.append(KeyEvent(KeyCode.OTHER))
            pos = len(text)
            continue

        event, used = _decode_escape(rest)
        events.append(event)
        pos += used

    return events, text[pos:]
