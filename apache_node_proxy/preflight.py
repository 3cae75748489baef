"""
Precondition checks run before any virtual host file is touched.
"""

import logging
import os

from rich.console import Console

from apache_node_proxy.branding import cx_print
from apache_node_proxy.config.exceptions import PreconditionError
from apache_node_proxy.models import Configuration
from apache_node_proxy.settings import ProxySettings

logger = logging.getLogger(__name__)


class PreflightChecker:
    """
    Verify the host can be configured.

    Checks run in a fixed order (root privileges, Bitnami base directory,
    Apache configuration directory, project directory) and the first failure
    raises PreconditionError.
    """

    def __init__(self, settings: ProxySettings, console: Console | None = None):
        self.settings = settings
        self.console = console

    def check(self, config: Configuration) -> None:
        cx_print("Validating configuration...", "thinking", self.console)

        self._check_root()
        self._check_dir(
            self.settings.base_dir,
            "Bitnami installation not found. "
            "This tool is designed for Bitnami Apache installations.",
        )
        self._check_dir(self.settings.conf_dir, "Apache configuration directory not found.")
        if not config.project_path.exists():
            raise PreconditionError(f"Project directory does not exist: {config.project_path}")

        cx_print("Configuration validation passed", "success", self.console)

    def _check_root(self) -> None:
        if not hasattr(os, "geteuid"):
            raise PreconditionError("This tool requires root privileges. Please run with sudo.")
        euid = os.geteuid()
        logger.debug("Effective uid: %d", euid)
        if euid != 0:
            raise PreconditionError("This tool requires root privileges. Please run with sudo.")

    def _check_dir(self, path, message: str) -> None:
        logger.debug("Checking directory %s", path)
        if not path.exists():
            raise PreconditionError(message)
