import logging
import shlex
import subprocess

from rich.console import Console

from apache_node_proxy.branding import cx_header, cx_print
from apache_node_proxy.config.exceptions import RestartError
from apache_node_proxy.settings import ProxySettings

logger = logging.getLogger(__name__)


class ServiceRestarter:
    """Restart Apache through the Bitnami control script."""

    def __init__(self, settings: ProxySettings, console: Console | None = None):
        self.settings = settings
        self.console = console

    def restart(self) -> None:
        """
        Run the restart command with inherited stdio and wait for it.

        Raises:
            RestartError: If the command cannot be run or exits non-zero
        """
        cx_header("🔄 Restarting Apache...", self.console)

        command = self.settings.restart_command
        logger.info("Running %s", command)
        try:
            result = subprocess.run(shlex.split(command), check=False)
        except (OSError, ValueError) as e:
            logger.debug("Restart command could not be started: %s", e)
            raise RestartError(self._failure_message())

        if result.returncode != 0:
            logger.debug("Restart command exited with %d", result.returncode)
            raise RestartError(self._failure_message())

        cx_print("Apache restarted successfully", "success", self.console)

    def _failure_message(self) -> str:
        return (
            "Failed to restart Apache. Please restart manually using: "
            f"sudo {self.settings.restart_command}"
        )
