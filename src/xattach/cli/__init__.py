"""CLI entry point for xattach.

Uses Typer for command routing with lazy loading for performance.
"""

import typer

from xattach.utils.exceptions import XattachError

__all__ = ["app", "main"]

app = typer.Typer(
    name="xattach",
    help="Attach extra displays to the primary one with xrandr",
    no_args_is_help=False,
)


def _fail(error: XattachError) -> None:
    from xattach.cli.ui import print_error

    print_error(str(error))
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the interactive attach menu if no command given."""
    if ctx.invoked_subcommand is None:
        from xattach.cli.commands import cmd_interactive

        try:
            cmd_interactive()
        except XattachError as e:
            _fail(e)


@app.command()
def outputs() -> None:
    """List connected outputs."""
    from xattach.cli.commands import cmd_outputs

    try:
        cmd_outputs()
    except XattachError as e:
        _fail(e)


@app.command()
def attach(
    output: str = typer.Argument(..., help="Output to attach, e.g. HDMI-1"),
    position: str = typer.Argument(..., help="left, right, above or below"),
) -> None:
    """Attach OUTPUT next to the primary display."""
    from xattach.cli.commands import cmd_attach

    try:
        ok = cmd_attach(output, position)
    except XattachError as e:
        _fail(e)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def status() -> None:
    """Show current status."""
    from xattach.cli.commands import cmd_status

    cmd_status()


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from xattach.cli.commands import cmd_debug_on

    cmd_debug_on()


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from xattach.cli.commands import cmd_debug_off

    cmd_debug_off()


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
