"""
Write Apache virtual host files into the vhosts directory.
"""

import logging
import shutil
from pathlib import Path

from rich.console import Console

from apache_node_proxy.branding import cx_header, cx_print
from apache_node_proxy.config.exceptions import WriteError
from apache_node_proxy.config.generator import VirtualHostGenerator
from apache_node_proxy.models import Configuration
from apache_node_proxy.settings import ProxySettings

logger = logging.getLogger(__name__)

# Disabled samples shipped with Bitnami and the names that enable them
PREDEFINED_FILES = [
    ("sample-vhost.conf.disabled", "sample-vhost.conf"),
    ("sample-https-vhost.conf.disabled", "sample-https-vhost.conf"),
]


class VirtualHostWriter:
    """
    Enable the predefined sample virtual hosts or write custom ones.

    Attributes:
        settings: Installation locations
        generator: Renderer used in custom mode
    """

    def __init__(
        self,
        settings: ProxySettings,
        generator: VirtualHostGenerator | None = None,
        console: Console | None = None,
    ):
        self.settings = settings
        self.generator = generator or VirtualHostGenerator(settings)
        self.console = console

    def write(self, config: Configuration) -> list[Path]:
        """Write the virtual hosts for a configuration and return the paths written."""
        cx_header("⚙️  Configuring virtual hosts...", self.console)

        if config.use_predefined:
            return self.enable_predefined()
        return self.write_custom(config)

    def enable_predefined(self) -> list[Path]:
        """
        Copy each disabled sample onto its enabled name.

        A missing sample or a failed copy is reported as a warning and the
        remaining samples are still processed.
        """
        enabled = []
        for source, target in PREDEFINED_FILES:
            source_path = self.settings.vhosts_dir / source
            target_path = self.settings.vhosts_dir / target

            if not source_path.exists():
                cx_print(f"Predefined file not found: {source}", "warning", self.console)
                continue

            try:
                shutil.copyfile(source_path, target_path)
            except OSError as e:
                logger.debug("Copy %s -> %s failed", source_path, target_path, exc_info=True)
                cx_print(f"Could not enable {target}: {e}", "warning", self.console)
                continue

            cx_print(f"Enabled {target}", "success", self.console)
            enabled.append(target_path)
        return enabled

    def write_custom(self, config: Configuration) -> list[Path]:
        written = []

        http_path = self.settings.vhosts_dir / config.http_filename
        self._write_file(http_path, self.generator.render_http(config))
        cx_print(f"Created HTTP virtual host: {http_path}", "success", self.console)
        written.append(http_path)

        if config.use_https:
            https_path = self.settings.vhosts_dir / config.https_filename
            self._write_file(https_path, self.generator.render_https(config))
            cx_print(f"Created HTTPS virtual host: {https_path}", "success", self.console)
            written.append(https_path)

        return written

    def _write_file(self, output_path: Path, content: str):
        """
        Write content, replacing any existing file.

        Raises:
            WriteError: If writing fails
        """
        logger.info("Writing %s", output_path)
        try:
            output_path.write_text(content, encoding="utf-8")
        except PermissionError:
            raise WriteError(
                f"Permission denied writing to {output_path}. "
                f"Try running with sudo."
            )
        except OSError as e:
            raise WriteError(f"Failed to write virtual host to {output_path}: {e}")
