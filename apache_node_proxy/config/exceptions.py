"""
Custom exceptions for apache-node-proxy.
"""


class ProxyError(Exception):
    """Base exception for every failure that aborts a configuration run."""
    pass


class ValidationError(ProxyError):
    """Raised when user input or a rendered virtual host is invalid."""
    pass


class PreconditionError(ProxyError):
    """Raised when the host environment is not fit for configuration."""
    pass


class TemplateError(ProxyError):
    """Raised when template processing fails."""
    pass


class WriteError(ProxyError):
    """Raised when a virtual host file cannot be written."""
    pass


class RestartError(ProxyError):
    """Raised when the web server restart command fails."""
    pass
