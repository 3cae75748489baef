"""
The configuration workflow: collect, validate, write, restart, summarize.
"""

import logging
from typing import Callable

from rich.console import Console

from apache_node_proxy.branding import console as default_console
from apache_node_proxy.branding import cx_print, show_banner
from apache_node_proxy.config.exceptions import ProxyError
from apache_node_proxy.models import Configuration
from apache_node_proxy.preflight import PreflightChecker
from apache_node_proxy.restarter import ServiceRestarter
from apache_node_proxy.settings import ProxySettings
from apache_node_proxy.summary import print_summary
from apache_node_proxy.vhosts import VirtualHostWriter

logger = logging.getLogger(__name__)


class Configurator:
    """
    Run one configuration pass.

    Steps run strictly in order and the first ProxyError ends the run with
    exit code 1. Files already written are left in place.
    """

    def __init__(self, settings: ProxySettings | None = None, console: Console | None = None):
        self.settings = settings or ProxySettings.from_env()
        self.console = console or default_console
        self.preflight = PreflightChecker(self.settings, self.console)
        self.writer = VirtualHostWriter(self.settings, console=self.console)
        self.restarter = ServiceRestarter(self.settings, self.console)

    def run(self, config_source: Callable[[], Configuration]) -> int:
        """
        Execute the workflow.

        Args:
            config_source: Callable producing the Configuration (prompts or CLI options)

        Returns:
            0 on success, 1 on any failure
        """
        show_banner(self.console)

        try:
            config = config_source()
            self.preflight.check(config)
            written = self.writer.write(config)
            logger.info("Wrote %d virtual host file(s)", len(written))
            self.restarter.restart()
        except ProxyError as e:
            logger.debug("Run aborted", exc_info=True)
            self.console.print()
            cx_print(f"Error: {e}", "error", self.console)
            return 1

        self.console.print()
        cx_print("Configuration completed successfully!", "success", self.console)
        print_summary(config, self.console)
        return 0
