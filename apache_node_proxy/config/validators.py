"""
Validators for user input and generated virtual host files.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, List

from .exceptions import ValidationError

APP_NAME_PATTERN = re.compile(r"[a-zA-Z0-9\-_]+")

MIN_PORT = 1
MAX_PORT = 65535


def absolute_project_path(path: str | os.PathLike) -> Path:
    """Make a path absolute without following symlinks or expanding "~"."""
    return Path(os.path.abspath(path))


def validate_project_path(path: str | os.PathLike) -> Path:
    """
    Check that a project path exists and return it as an absolute path.

    The path is kept as entered (symlinks are not resolved) so DocumentRoot
    names the directory the user chose.

    Raises:
        ValidationError: If the path is empty or does not exist
    """
    if not str(path).strip():
        raise ValidationError("Project path cannot be empty")

    candidate = absolute_project_path(path)
    if not candidate.exists():
        raise ValidationError(f"Project path does not exist: {path}")
    return candidate


def validate_port(port: Any) -> int:
    """
    Coerce a port to int and check it is within 1-65535.

    Raises:
        ValidationError: If the value is not an integer or out of range
    """
    if isinstance(port, bool):
        raise ValidationError(f"Port must be a number: {port}")
    try:
        value = int(str(port).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Port must be a number: {port}")

    if value < MIN_PORT or value > MAX_PORT:
        raise ValidationError("Port must be between 1 and 65535")
    return value


def validate_app_name(name: str) -> str:
    """
    Check an application name is safe to embed in a file name.

    Raises:
        ValidationError: If the name has characters outside [a-zA-Z0-9-_]
    """
    if not isinstance(name, str) or not APP_NAME_PATTERN.fullmatch(name):
        raise ValidationError(
            "App name can only contain letters, numbers, hyphens, and underscores"
        )
    return name


class VirtualHostValidator:
    """Validator for rendered Apache virtual host blocks."""

    SSL_DIRECTIVES = ["SSLEngine", "SSLCertificateFile", "SSLCertificateKeyFile"]

    def validate(self, config: str, params: Dict[str, Any]) -> List[str]:
        """
        Validate virtual host content.

        Args:
            config: The rendered virtual host block
            params: Parameters used to render it (port, ssl_enabled)

        Returns:
            List of validation warnings (empty if valid)

        Raises:
            ValidationError: If a required directive is missing
        """
        warnings = []

        if "<VirtualHost" not in config or "</VirtualHost>" not in config:
            raise ValidationError("Invalid virtual host: missing VirtualHost block")

        if "DocumentRoot" not in config:
            raise ValidationError("Invalid virtual host: missing DocumentRoot")

        # Every proxied URL must target the configured application port
        proxy_ports = re.findall(r"ProxyPass(?:Reverse)?\s+/\s+http://localhost:(\d+)/", config)
        if not proxy_ports:
            raise ValidationError("Invalid virtual host: missing ProxyPass directive")
        port = params.get("port")
        for found in proxy_ports:
            if port is not None and int(found) != int(port):
                raise ValidationError(f"ProxyPass targets port {found}, expected {port}")

        if params.get("ssl_enabled"):
            missing = [d for d in self.SSL_DIRECTIVES if d not in config]
            if missing:
                raise ValidationError(f"SSL enabled but missing directives: {', '.join(missing)}")
        elif "SSLEngine" in config:
            warnings.append("SSLEngine present in a non-SSL virtual host")

        return warnings
