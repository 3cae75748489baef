"""
Virtual Host Template System
============================

Render and validate the Apache virtual host blocks written by apache-node-proxy.

Supported block types:
- http: reverse proxy on port 80
- https: SSL reverse proxy on port 443
"""

from .exceptions import (
    PreconditionError,
    ProxyError,
    RestartError,
    TemplateError,
    ValidationError,
    WriteError,
)
from .generator import VirtualHostGenerator

__all__ = [
    "VirtualHostGenerator",
    "ProxyError",
    "ValidationError",
    "PreconditionError",
    "TemplateError",
    "WriteError",
    "RestartError",
]
