"""Console and panel helpers for non-menu output."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from xattach.core.xrandr import DisplayLayout

console = Console()

PANEL_WIDTH = 60


def layout_panel(layout: DisplayLayout) -> Panel:
    """Build a panel listing the primary and the other connected outputs."""
    lines = []
    if layout.primary:
        lines.append(f"[bold]Primary:[/bold] [cyan]{escape(layout.primary)}[/cyan]")
    else:
        lines.append("[bold]Primary:[/bold] [yellow]none[/yellow]")

    if layout.secondary:
        lines.append("[bold]Others:[/bold]")
        for name in layout.secondary:
            lines.append(f"  {escape(name)}")
    else:
        lines.append("[dim]No other connected displays[/dim]")

    return Panel(
        "\n".join(lines),
        title="Displays",
        border_style="cyan",
        width=min(PANEL_WIDTH, console.width),
    )


def print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
