"""
Fixed locations of the Bitnami Apache installation.

Defaults match a stock Bitnami stack. Each location can be overridden through
an environment variable, which is how non-standard installs are targeted.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BITNAMI_BASE = "/opt/bitnami"
APACHE_CONF_DIR = "/opt/bitnami/apache/conf"
VHOSTS_DIR = "/opt/bitnami/apache/conf/vhosts"
RESTART_COMMAND = "/opt/bitnami/ctlscript.sh restart apache"

ENV_PREFIX = "APACHE_NODE_PROXY_"


@dataclass(frozen=True)
class ProxySettings:
    base_dir: Path = Path(BITNAMI_BASE)
    conf_dir: Path = Path(APACHE_CONF_DIR)
    vhosts_dir: Path = Path(VHOSTS_DIR)
    restart_command: str = RESTART_COMMAND

    @property
    def cert_file(self) -> Path:
        return self.conf_dir / "bitnami" / "certs" / "server.crt"

    @property
    def cert_key_file(self) -> Path:
        return self.conf_dir / "bitnami" / "certs" / "server.key"

    @classmethod
    def from_env(cls, environ=None) -> "ProxySettings":
        """Build settings, applying APACHE_NODE_PROXY_* overrides when set."""
        env = os.environ if environ is None else environ

        def lookup(name: str, default: str) -> str:
            value = env.get(f"{ENV_PREFIX}{name}", "").strip()
            if value:
                logger.debug("Using %s%s=%s", ENV_PREFIX, name, value)
                return value
            return default

        return cls(
            base_dir=Path(lookup("BASE_DIR", BITNAMI_BASE)),
            conf_dir=Path(lookup("CONF_DIR", APACHE_CONF_DIR)),
            vhosts_dir=Path(lookup("VHOSTS_DIR", VHOSTS_DIR)),
            restart_command=lookup("RESTART_COMMAND", RESTART_COMMAND),
        )
