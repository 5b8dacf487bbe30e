"""Interactive attach flow."""

from functools import partial
from typing import Callable, Optional, Sequence

from rich.markup import escape

from xattach.cli.ui.menu import select_option
from xattach.cli.ui.panels import console, print_error
from xattach.cli.ui.terminal import TtyTerminal
from xattach.core.selection import Selected, SelectionOutcome
from xattach.core.xrandr import DisplayLayout, attach_args, query_layout, run_attach
from xattach.utils.config import Config
from xattach.utils.constants import DISPLAY_PROMPT, POSITION_PROMPT, POSITIONS
from xattach.utils.exceptions import TerminalError

MenuFn = Callable[[str, Sequence[str]], Optional[SelectionOutcome]]
RunnerFn = Callable[[str, str, str], bool]


def _chosen(outcome: Optional[SelectionOutcome]) -> Optional[str]:
    """Selected option, or None for cancel / no options."""
    if isinstance(outcome, Selected):
        return outcome.option
    return None


def attach_workflow(
    menu: Optional[MenuFn] = None,
    layout: Optional[DisplayLayout] = None,
    runner: Optional[RunnerFn] = None,
) -> None:
    """Repeatedly pick a display and a position and attach it to the primary.

    Stops when the user cancels, no displays are left, or the terminal fails.
    Without `menu`, every prompt runs on one shared TtyTerminal so keys typed
    ahead of the next menu are not lost.
    """
    config = Config()
    if layout is None:
        layout = query_layout(config.xrandr_command)
    if runner is None:

        def _run(output: str, position: str, primary: str) -> bool:
            return run_attach(output, position, primary, xrandr=config.xrandr_command)

        runner = _run

    if not layout.primary:
        console.print("No primary display found. Exiting.")
        return

    remaining = layout.secondary
    if not remaining:
        console.print("No other connected displays found. Exiting.")
        return

    console.print(f"Primary display: [cyan]{escape(layout.primary)}[/cyan]")
    while True:
        if not remaining:
            console.print("No more displays left.")
            break

        try:
            if menu is None:
                menu = partial(select_option, terminal=TtyTerminal())
            display = _chosen(menu(DISPLAY_PROMPT, remaining))
            if display is None:
                console.print("Quitting.")
                break

            position = _chosen(menu(POSITION_PROMPT, POSITIONS))
            if position is None:
                console.print("Quitting.")
                break
        except TerminalError as e:
            print_error(str(e))
            break

        args = attach_args(display, position, layout.primary)
        console.print(f"Running: {escape(config.xrandr_command)} {escape(' '.join(args))}")

        if runner(display, position, layout.primary):
            console.print("[green]Display attached successfully.[/green]")
            remaining = [name for name in remaining if name != display]
        else:
            console.print(
                "[yellow]Failed to attach display.[/yellow] Check xrandr output for errors."
            )
