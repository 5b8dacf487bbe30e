"""Tests for raw input decoding."""

import pytest

from xattach.core.keys import KeyCode, KeyEvent, decode_keys


def codes(text, final=False):
    events, rest = decode_keys(text, final=final)
    return [e.code for e in events], rest


class TestDecodeKeys:
    @pytest.mark.parametrize("seq", ["\x1b[A", "\x1bOA"])
    def test_up(self, seq):
        assert codes(seq) == ([KeyCode.UP], "")

    @pytest.mark.parametrize("seq", ["\x1b[B", "\x1bOB"])
    def test_down(self, seq):
        assert codes(seq) == ([KeyCode.DOWN], "")

    @pytest.mark.parametrize("seq", ["\r", "\n"])
    def test_enter(self, seq):
        assert codes(seq) == ([KeyCode.ENTER], "")

    def test_plain_char(self):
        events, _ = decode_keys("q")
        assert events == [KeyEvent(KeyCode.CHAR, char="q")]
        assert events[0].is_char("q")

    def test_ctrl_char(self):
        events, _ = decode_keys("\x11")
        assert events == [KeyEvent(KeyCode.CHAR, char="q", ctrl=True)]
        assert not events[0].is_char("q")

    def test_alt_char(self):
        events, _ = decode_keys("\x1bq")
        assert events == [KeyEvent(KeyCode.CHAR, char="q", alt=True)]
        assert events[0].has_modifiers

    def test_lone_escape_waits_for_more(self):
        assert codes("\x1b") == ([], "\x1b")

    def test_lone_escape_flushed_when_final(self):
        assert codes("\x1b", final=True) == ([KeyCode.ESCAPE], "")

    def test_partial_csi_waits(self):
        assert codes("\x1b[1;5") == ([], "\x1b[1;5")

    def test_unknown_csi_is_other(self):
        assert codes("\x1b[1;5A") == ([KeyCode.OTHER], "")
        assert codes("\x1b[C") == ([KeyCode.OTHER], "")

    def test_several_keys_in_one_chunk(self):
        assert codes("\x1b[B\x1b[Bq\r") == (
            [KeyCode.DOWN, KeyCode.DOWN, KeyCode.CHAR, KeyCode.ENTER],
            "",
        )

    def test_double_escape(self):
        assert codes("\x1b\x1b", final=True) == ([KeyCode.ESCAPE, KeyCode.ESCAPE], "")

    def test_non_printable_is_other(self):
        assert codes("\x7f") == ([KeyCode.OTHER], "")

    def test_modified_arrows_and_alt_enter_are_ignored(self):
        # Shift+Up / Ctrl+Down do not move the highlight, Alt+Enter does not select
        assert codes("\x1b[1;2A\x1b[1;5B") == ([KeyCode.OTHER, KeyCode.OTHER], "")
        events, _ = decode_keys("\x1b\r")
        assert events == [KeyEvent(KeyCode.OTHER, alt=True)]
