"""
Statica - the response layer of a static asset server.

This module exports the composed ASGI application, the Responder and the
policy resolvers applied to every response.
"""

from .api import StaticSite
from .cache_control import resolve_cache_control
from .config import Config
from .endpoints import Endpoint
from .error_pages import ErrorPageConfig, send_error_page
from .exceptions import (
    ConfigurationError,
    ContractViolation,
    ResourceNotFound,
    StaticaError,
)
from .models import Request
from .providers import FileSystemProvider
from .responder import FileTransfer, Responder
from .sink import ResponseSink

__all__ = [
    "Config",
    "ConfigurationError",
    "ContractViolation",
    "Endpoint",
    "ErrorPageConfig",
    "FileSystemProvider",
    "FileTransfer",
    "Request",
    "ResourceNotFound",
    "Responder",
    "ResponseSink",
    "StaticSite",
    "StaticaError",
    "resolve_cache_control",
    "send_error_page",
]
