"""Tests for the tty device, run against a pseudo-terminal."""

import os
import pty
import termios
import tty

import pytest

from xattach.cli.ui.menu import select_option
from xattach.cli.ui.terminal import TtyTerminal
from xattach.core.keys import KeyCode
from xattach.core.selection import Cancelled, Selected
from xattach.utils.exceptions import InputReadFailure, TerminalUnavailable


@pytest.fixture
def pty_pair():
    """Yield (master_fd, slave_fd) and close both afterwards."""
    master, slave = pty.openpty()
    yield master, slave
    for fd in (master, slave):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def device(pty_pair):
    master, slave = pty_pair
    return TtyTerminal(fd_in=slave, fd_out=slave)


def read_output(master):
    """Drain everything the device wrote so far."""
    import select

    data = b""
    while select.select([master], [], [], 0.05)[0]:
        chunk = os.read(master, 4096)
        if not chunk:
            break
        data += chunk
    return data.decode("utf-8", "replace")


class TestRawMode:
    def test_enable_and_restore(self, device, pty_pair):
        _, slave = pty_pair
        before = termios.tcgetattr(slave)

        device.enable_raw_mode()
        raw = termios.tcgetattr(slave)
        assert not raw[3] & termios.ICANON
        assert not raw[3] & termios.ECHO
        assert not raw[3] & termios.ISIG
        assert device.raw

        device.disable_raw_mode()
        assert termios.tcgetattr(slave) == before
        assert not device.raw

    def test_disable_without_enable_is_noop(self, device, monkeypatch):
        def fail(*args):
            raise AssertionError("tcsetattr called")

        monkeypatch.setattr("xattach.cli.ui.terminal.termios.tcsetattr", fail)
        device.disable_raw_mode()
        assert not device.raw

    def test_not_a_tty(self, tmp_path):
        with open(tmp_path / "f", "w+") as f:
            term = TtyTerminal(fd_in=f.fileno(), fd_out=f.fileno())
            with pytest.raises(TerminalUnavailable, match="not a terminal"):
                term.enable_raw_mode()


class TestOutput:
    def test_escape_sequences(self, device, pty_pair):
        master, _ = pty_pair
        device.hide_cursor()
        device.move_to(0, 4)
        device.clear_line()
        device.write("hi")
        device.show_cursor()
        assert read_output(master) == "\033[?25l\033[5;1H\033[2Khi\033[?25h"


class TestInput:
    def test_read_keys(self, device, pty_pair):
        master, _ = pty_pair
        device.enable_raw_mode()
        os.write(master, b"\x1b[Bq\r")
        assert device.read_key().code == KeyCode.DOWN
        assert device.read_key().is_char("q")
        assert device.read_key().code == KeyCode.ENTER

    def test_lone_escape(self, device, pty_pair):
        master, _ = pty_pair
        device.enable_raw_mode()
        os.write(master, b"\x1b")
        assert device.read_key().code == KeyCode.ESCAPE

    def test_cursor_position_reply(self, device, pty_pair):
        master, _ = pty_pair
        device.enable_raw_mode()
        # Typed key arrives before the reply and must not be lost
        os.write(master, b"x\x1b[12;5R")
        assert device.cursor_position() == (4, 11)
        assert "\033[6n" in read_output(master)
        assert device.read_key().is_char("x")

    def test_cursor_position_timeout(self, device, monkeypatch):
        monkeypatch.setattr("xattach.cli.ui.terminal.CURSOR_QUERY_TIMEOUT", 0.05)
        device.enable_raw_mode()
        with pytest.raises(TerminalUnavailable, match="cursor position"):
            device.cursor_position()

    def test_cursor_position_poll_failure(self, device, monkeypatch):
        device.enable_raw_mode()

        def broken_select(*args):
            raise OSError("poll failed")

        monkeypatch.setattr("xattach.cli.ui.terminal.select.select", broken_select)
        with pytest.raises(TerminalUnavailable, match="poll failed"):
            device.cursor_position()

    def test_read_failure(self, tmp_path):
        with open(tmp_path / "empty", "w+") as f:
            term = TtyTerminal(fd_in=f.fileno(), fd_out=f.fileno())
            with pytest.raises(InputReadFailure):
                term.read_key()


class TestMenuOnPty:
    """Keys are queued before the menu starts, so the pty is put in raw mode first."""

    def test_select_and_restore(self, device, pty_pair):
        master, slave = pty_pair
        tty.setraw(slave)
        before = termios.tcgetattr(slave)
        os.write(master, b"\x1b[3;1R\x1b[B\x1b[B\r")

        outcome = select_option("Pick:", ["left", "right", "above", "below"], terminal=device)

        assert outcome == Selected("above")
        assert termios.tcgetattr(slave) == before
        out = read_output(master)
        assert out.startswith("\033[?25l")
        assert out.endswith("\033[?25h")
        assert "> above" in out

    def test_cancel_with_q_restores(self, device, pty_pair):
        master, slave = pty_pair
        tty.setraw(slave)
        before = termios.tcgetattr(slave)
        os.write(master, b"\x1b[1;1R\x1b[Aq")

        assert select_option("Pick:", ["HDMI-1", "DP-1"], terminal=device) == Cancelled()
        assert termios.tcgetattr(slave) == before
