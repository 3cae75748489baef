"""
apache-node-proxy - configure Bitnami Apache virtual hosts for Node.js applications.
"""

from .branding import VERSION
from .models import Configuration
from .settings import ProxySettings
from .workflow import Configurator

__version__ = VERSION

__all__ = ["Configuration", "Configurator", "ProxySettings"]
