"""
Collect a Configuration from the user, interactively or from CLI options.
"""

import logging
import os
from typing import Callable, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from apache_node_proxy.branding import console as default_console
from apache_node_proxy.config.exceptions import ValidationError
from apache_node_proxy.config.validators import (
    validate_app_name,
    validate_port,
    validate_project_path,
)
from apache_node_proxy.models import Configuration

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_APP_NAME = "myapp"

T = TypeVar("T")


def _ask_until_valid(ask: Callable[[], T], validate: Callable[[T], T], out: Console) -> T:
    """Repeat a prompt until the answer passes validation."""
    while True:
        answer = ask()
        try:
            return validate(answer)
        except ValidationError as e:
            out.print(f"[red]>> {escape(str(e))}[/red]")


def collect_interactive(console: Console | None = None, cwd: str | None = None) -> Configuration:
    """Prompt for every field, re-prompting on invalid answers."""
    out = console or default_console
    default_path = cwd or os.getcwd()

    project_path = _ask_until_valid(
        lambda: Prompt.ask(
            "[bold cyan]Enter your Node.js project path[/bold cyan]",
            default=default_path,
            console=out,
        ),
        validate_project_path,
        out,
    )

    port = _ask_until_valid(
        lambda: IntPrompt.ask(
            "[bold cyan]Enter the port your Node.js application runs on[/bold cyan]",
            default=DEFAULT_PORT,
            console=out,
        ),
        validate_port,
        out,
    )

    app_name = _ask_until_valid(
        lambda: Prompt.ask(
            "[bold cyan]Enter a name for your application (used for config files)[/bold cyan]",
            default=DEFAULT_APP_NAME,
            console=out,
        ),
        validate_app_name,
        out,
    )

    use_predefined = Confirm.ask(
        "Do you want to use predefined virtual hosts (if available)?",
        default=True,
        console=out,
    )
    use_https = Confirm.ask(
        "Do you want to configure HTTPS virtual host?",
        default=True,
        console=out,
    )

    config = Configuration(
        project_path=project_path,
        port=port,
        app_name=app_name,
        use_https=use_https,
        use_predefined=use_predefined,
    )
    logger.debug("Collected configuration: %s", config)
    return config


def collect_from_options(
    path: str | None = None,
    port=DEFAULT_PORT,
    name: str = DEFAULT_APP_NAME,
    https: bool = True,
    predefined: bool = False,
) -> Configuration:
    """
    Build a Configuration from non-interactive options.

    Raises:
        ValidationError: If any field is invalid
    """
    config = Configuration(
        project_path=path if path is not None else os.getcwd(),
        port=port,
        app_name=name,
        use_https=https,
        use_predefined=predefined,
    )
    logger.debug("Configuration from options: %s", config)
    return config
