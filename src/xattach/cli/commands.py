"""CLI command handlers."""

from rich.markup import escape

from xattach.cli.ui import console, layout_panel
from xattach.core.xrandr import attach_args, query_layout, run_attach
from xattach.utils.config import Config, get_xattach_dir
from xattach.utils.constants import POSITIONS
from xattach.utils.debug import reload_config
from xattach.utils.exceptions import DisplayCommandError


def cmd_interactive():
    """Run the interactive attach loop."""
    from xattach.cli.ui.interactive import attach_workflow

    attach_workflow()


def cmd_outputs():
    """Show primary and other connected outputs."""
    config = Config()
    layout = query_layout(config.xrandr_command)
    console.print(layout_panel(layout))


def cmd_attach(output: str, position: str) -> bool:
    """Attach an output next to the primary without the menu.

    Returns True if xrandr reported success.
    """
    if position not in POSITIONS:
        raise DisplayCommandError(
            f"unknown position '{position}' (expected one of: {', '.join(POSITIONS)})"
        )

    config = Config()
    layout = query_layout(config.xrandr_command)
    if not layout.primary:
        raise DisplayCommandError("no primary display found")
    if output not in layout.secondary:
        raise DisplayCommandError(
            f"'{output}' is not a connected non-primary output"
        )

    args = attach_args(output, position, layout.primary)
    console.print(f"Running: {escape(config.xrandr_command)} {escape(' '.join(args))}")
    if run_attach(output, position, layout.primary, xrandr=config.xrandr_command):
        console.print("[green]Display attached successfully.[/green]")
        return True
    console.print("[yellow]Failed to attach display.[/yellow] Check xrandr output for errors.")
    return False


def cmd_status():
    """Show current status."""
    xattach_dir = get_xattach_dir()
    config = Config(xattach_dir)

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]Config:[/bold] [dim]{xattach_dir}[/dim]")
    console.print(f"[bold]xrandr:[/bold] [cyan]{escape(config.xrandr_command)}[/cyan]")


def cmd_debug_on():
    """Enable debug logging."""
    config = Config(get_xattach_dir())
    config.set_debug(True)
    reload_config()
    console.print(f"Debug mode [green]enabled[/green]. Logging to {config.log_path}")


def cmd_debug_off():
    """Disable debug logging."""
    config = Config(get_xattach_dir())
    config.set_debug(False)
    reload_config()
    console.print("Debug mode [yellow]disabled[/yellow]")
