"""
Render virtual hosts without touching the Apache installation.

Preview needs neither root nor a Bitnami install, and the project path does
not have to exist locally, so configs for a remote server can be inspected
or generated on a workstation.
"""

import logging
from pathlib import Path

from apache_node_proxy.config.exceptions import WriteError
from apache_node_proxy.config.generator import VirtualHostGenerator
from apache_node_proxy.config.validators import (
    absolute_project_path,
    validate_app_name,
    validate_port,
)
from apache_node_proxy.settings import ProxySettings

logger = logging.getLogger(__name__)


def render_preview(
    project_path: str,
    port,
    app_name: str,
    use_https: bool,
    settings: ProxySettings,
    output_dir: str | Path | None = None,
) -> dict[str, str]:
    """
    Render the custom-mode virtual hosts, optionally writing them to output_dir.

    A relative project path is made absolute against the current directory.

    Returns:
        Mapping of file name to rendered content, HTTP first

    Raises:
        ValidationError: If the port or app name is invalid
        WriteError: If output_dir cannot be written
    """
    project_path = absolute_project_path(project_path)
    port = validate_port(port)
    app_name = validate_app_name(app_name)
    generator = VirtualHostGenerator(settings)

    rendered = {
        f"{app_name}-http-vhost.conf": generator.render(
            "http", project_path=project_path, port=port
        ),
    }
    if use_https:
        rendered[f"{app_name}-https-vhost.conf"] = generator.render(
            "https", project_path=project_path, port=port
        )

    if output_dir is not None:
        target = Path(output_dir)
        try:
            target.mkdir(parents=True, exist_ok=True)
            for name, content in rendered.items():
                logger.info("Writing preview %s", target / name)
                (target / name).write_text(content, encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Failed to write preview to {target}: {e}")

    return rendered
