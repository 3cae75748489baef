"""
Console output helpers.

All user-facing output goes through the shared rich console so that the
styling of status lines stays consistent across the workflow.
"""

from rich.console import Console
from rich.markup import escape

VERSION = "1.0.1"

console = Console()

_STATUS_STYLES = {
    "info": ("[bold blue]i[/bold blue]", "white"),
    "success": ("[bold green]✅[/bold green]", "green"),
    "warning": ("[bold yellow]⚠️ [/bold yellow]", "yellow"),
    "error": ("[bold red]❌[/bold red]", "red"),
    "thinking": ("[bold cyan]⚙️ [/bold cyan]", "yellow"),
}


def cx_print(message: str, status: str = "info", out: Console | None = None):
    """Print a status line, prefixed with an icon for the given status.

    The message is printed literally; rich markup in it is not interpreted.
    """
    target = out or console
    icon, style = _STATUS_STYLES.get(status, _STATUS_STYLES["info"])
    target.print(f"{icon} [{style}]{escape(message)}[/{style}]")


def cx_header(title: str, out: Console | None = None):
    target = out or console
    target.print()
    target.print(f"[bold blue]{title}[/bold blue]")


def show_banner(out: Console | None = None):
    target = out or console
    target.print("[bold blue]🚀 Apache Node.js Proxy[/bold blue]")
    target.print(
        "[dim]Automatically configure Apache virtual hosts for your Node.js application[/dim]\n"
    )
