from rich.console import Console
from rich.markup import escape

from apache_node_proxy.branding import console as default_console
from apache_node_proxy.models import Configuration


def print_summary(config: Configuration, console: Console | None = None) -> None:
    """Print a recap of the configuration and what to do next."""
    out = console or default_console

    out.print("\n[bold blue]📋 Configuration Summary:[/bold blue]")
    out.print(f"   Project Path: {escape(str(config.project_path))}", highlight=False)
    out.print(f"   Application Port: {config.port}", highlight=False)
    out.print(f"   Application Name: {config.app_name}", highlight=False)
    out.print(f"   HTTPS Enabled: {'Yes' if config.use_https else 'No'}", highlight=False)
    out.print(
        f"   Configuration Type: {'Predefined' if config.use_predefined else 'Custom'}",
        highlight=False,
    )

    out.print("\n[bold blue]🌐 Your application should now be accessible at:[/bold blue]")
    out.print("   HTTP: http://your-domain.com", highlight=False)
    if config.use_https:
        out.print("   HTTPS: https://your-domain.com", highlight=False)

    out.print("\n[yellow]💡 Next steps:[/yellow]")
    out.print(
        f"   1. Make sure your Node.js application is running on port {config.port}",
        highlight=False,
    )
    out.print("   2. Ensure your domain points to this server")
    out.print("   3. If using HTTPS, verify SSL certificates are properly configured")
