"""
Errors raised (or carried) by the response layer.

None of these are fatal to the process; each one is scoped to a single
request.
"""


class StaticaError(Exception):
    """Base class for every error defined by statica."""


class ContractViolation(StaticaError, TypeError):
    """A caller used the API incorrectly.

    Raised immediately and never recovered from: missing mandatory
    dependencies, mutating a finalized response, sending a second body.
    """


class ResourceNotFound(StaticaError, LookupError):
    """The requested file (or directory index) does not exist.

    Never raised by :meth:`Responder.send_file`; it is attached to the
    returned :class:`FileTransfer` instead.
    """

    def __init__(self, path):
        super().__init__(f"Resource not found: {path}")
        self.path = path


class ConfigurationFallbackExhausted(StaticaError):
    """Neither the override nor the configured error page could be read."""


class ConfigurationError(StaticaError, ValueError):
    """The site configuration could not be loaded or validated."""

    def __init__(self, message, messages=None):
        super().__init__(message)
        self.messages = messages or {}
