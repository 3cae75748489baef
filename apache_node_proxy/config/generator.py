"""
Virtual host generator with template support.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from .exceptions import TemplateError, ValidationError
from .validators import VirtualHostValidator

logger = logging.getLogger(__name__)


class VirtualHostGenerator:
    """
    Render Apache virtual host blocks from Jinja2 templates.

    Supported block types:
        - http: plain virtual host on port 80 proxying to the application
        - https: SSL virtual host on port 443 using the Bitnami certificates

    Example:
        >>> gen = VirtualHostGenerator(settings)
        >>> gen.render("http", project_path="/opt/bitnami/projects/app", port=3000)

    Attributes:
        settings: Installation locations, used for the certificate paths
        template_dir: Directory containing the vhost templates
        validate_configs: Whether to validate rendered blocks
    """

    TEMPLATE_FILES = {
        "http": "http-vhost.conf.j2",
        "https": "https-vhost.conf.j2",
    }

    def __init__(
        self,
        settings,
        template_dir: Optional[str] = None,
        validate_configs: bool = True,
    ):
        if template_dir is None:
            template_dir = str(Path(__file__).parent / "templates")

        self.settings = settings
        self.template_dir = Path(template_dir)
        self.validate_configs = validate_configs
        self.validator = VirtualHostValidator()

        # Rendered text goes straight into Apache config, never HTML
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            autoescape=False,
        )

    def render(self, block_type: str, **kwargs) -> str:
        """
        Render a virtual host block.

        Args:
            block_type: "http" or "https"
            **kwargs: Template variables (project_path, port)

        Returns:
            Rendered virtual host text without a trailing newline

        Raises:
            TemplateError: If the template is unknown, missing or fails to render
            ValidationError: If the rendered block is invalid
        """
        if block_type not in self.TEMPLATE_FILES:
            raise TemplateError(
                f"Unsupported virtual host type: {block_type}. "
                f"Supported types: {', '.join(self.TEMPLATE_FILES.keys())}"
            )

        params = {
            "cert_file": self.settings.cert_file,
            "cert_key_file": self.settings.cert_key_file,
            **kwargs,
        }
        content = self._render_template(block_type, params)

        if self.validate_configs:
            warnings = self._validate(
                content, {"port": params.get("port"), "ssl_enabled": block_type == "https"}
            )
            for warning in warnings:
                logger.warning("Validation warning for %s vhost: %s", block_type, warning)

        return content

    def render_http(self, config) -> str:
        return self.render("http", project_path=config.project_path, port=config.port)

    def render_https(self, config) -> str:
        return self.render("https", project_path=config.project_path, port=config.port)

    def _render_template(self, block_type: str, params: Dict[str, Any]) -> str:
        template_file = self.TEMPLATE_FILES[block_type]

        try:
            template = self.env.get_template(template_file)
            return template.render(**params)
        except TemplateNotFound:
            raise TemplateError(
                f"Template not found: {template_file} in {self.template_dir}"
            )
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_file}: {e}")

    def _validate(self, content: str, params: Dict[str, Any]) -> List[str]:
        try:
            return self.validator.validate(content, params)
        except ValidationError:
            raise
        except Exception as e:
            raise ValidationError(f"Validation failed: {e}")
