"""xrandr collaborator: query connected outputs and attach one to the primary."""

import subprocess
from dataclasses import dataclass, field
from typing import Optional

from xattach.utils.constants import DEFAULT_XRANDR_COMMAND, POSITION_FLAGS
from xattach.utils.debug import debug_xrandr
from xattach.utils.exceptions import DisplayCommandError


@dataclass
class DisplayLayout:
    """Connected outputs as reported by `xrandr --query`."""

    primary: Optional[str] = None
    connected: list[str] = field(default_factory=list)

    @property
    def secondary(self) -> list[str]:
        """Connected outputs other than the primary, in query order."""
        return [name for name in self.connected if name != self.primary]


def parse_query(text: str) -> DisplayLayout:
    """Parse `xrandr --query` output.

    Lines look like:
        eDP-1 connected primary 1920x1080+0+0 (normal left inverted ...) ...
        HDMI-1 disconnected (normal left inverted right x axis y axis)
    """
    layout = DisplayLayout()
    for line in text.splitlines():
        if " connected" not in line:
            continue
        parts = line.split()
        if not parts:
            continue
        name = parts[0]
        layout.connected.append(name)
        if "primary" in line:
            layout.primary = name
    return layout


def attach_args(output: str, position: str, primary: str) -> list[str]:
    """Build xrandr arguments placing `output` relative to `primary`."""
    flag = POSITION_FLAGS.get(position)
    if flag is None:
        raise DisplayCommandError(
            f"unknown position '{position}' (expected one of: {', '.join(POSITION_FLAGS)})"
        )
    return ["--output", output, "--auto", f"--{flag}", primary]


def query_layout(xrandr: str = DEFAULT_XRANDR_COMMAND) -> DisplayLayout:
    """Run `xrandr --query` and parse the result."""
    try:
        result = subprocess.run(
            [xrandr, "--query"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise DisplayCommandError(
            f"{xrandr} not found. Ensure X11 and xrandr are installed"
        ) from None

    if result.returncode != 0:
        debug_xrandr("query failed", returncode=result.returncode, stderr=result.stderr.strip())

    layout = parse_query(result.stdout)
    debug_xrandr("query parsed", primary=layout.primary, connected=",".join(layout.connected))
    return layout


def run_attach(
    output: str,
    position: str,
    primary: str,
    xrandr: str = DEFAULT_XRANDR_COMMAND,
) -> bool:
    """Attach `output` next to `primary`. Returns True if xrandr succeeded."""
    args = attach_args(output, position, primary)
    debug_xrandr("attach", args=" ".join(args))
    try:
        result = subprocess.run([xrandr] + args)
    except FileNotFoundError:
        raise DisplayCommandError(f"{xrandr} not found") from None
    return result.returncode == 0
