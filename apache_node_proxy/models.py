from dataclasses import dataclass
from pathlib import Path

from apache_node_proxy.config.validators import (
    validate_app_name,
    validate_port,
    validate_project_path,
)


@dataclass(frozen=True)
class Configuration:
    """
    Parameters of a single configuration run.

    Fields are validated on construction, so an instance always describes an
    existing project path, a port in 1-65535 and a file-name safe app name.
    """

    project_path: Path
    port: int
    app_name: str
    use_https: bool = True
    use_predefined: bool = False

    def __post_init__(self):
        # frozen dataclass: normalised values are set through object.__setattr__
        object.__setattr__(self, "project_path", validate_project_path(self.project_path))
        object.__setattr__(self, "port", validate_port(self.port))
        object.__setattr__(self, "app_name", validate_app_name(self.app_name))
        object.__setattr__(self, "use_https", bool(self.use_https))
        object.__setattr__(self, "use_predefined", bool(self.use_predefined))

    @property
    def http_filename(self) -> str:
        return f"{self.app_name}-http-vhost.conf"

    @property
    def https_filename(self) -> str:
        return f"{self.app_name}-https-vhost.conf"
