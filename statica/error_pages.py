"""
Error Page Resolver.

When a requested file cannot be found the response is still open (see
:meth:`Responder.send_file`). :func:`send_error_page` then fills in a body,
trying in order:

1. the override path given to the server, or else ``errorPage`` from the
   site config (a plain filesystem path),
2. the ``error_page`` declared in the site config (served from the site root),
3. the built-in page.

Whichever wins, the status is 404.
"""

import logging

import aiofiles

from . import status_codes
from .exceptions import ConfigurationFallbackExhausted
from .statics import DEFAULT_ERROR_PAGE, ERROR_PAGE_CONTENT_TYPE

logger = logging.getLogger(__name__)


class ErrorPageConfig:
    __slots__ = ["override", "configured"]

    def __init__(self, override=None, configured=None):
        self.override = override
        self.configured = configured

    def __repr__(self):
        return (
            f"<ErrorPageConfig override={self.override!r} "
            f"configured={self.configured!r}>"
        )

    @classmethod
    def from_config(cls, config=None, override=None):
        configured = getattr(config, "error_page", None)
        override = override or getattr(config, "error_page_override", None)
        return cls(override=override or None, configured=configured or None)


async def read_override(path):
    try:
        async with aiofiles.open(path, mode="rb") as f:
            return await f.read()
    except OSError as ex:
        logger.debug(f"Override error page {path!r} is unreadable: {ex}")
        return None


async def _send_override(responder, path):
    body = await read_override(path)
    if body is None:
        return False
    responder.set("Content-Type", ERROR_PAGE_CONTENT_TYPE).send(body)
    return True


async def _send_configured(responder, path):
    transfer = await responder.send_file(path)
    if not transfer.ok:
        logger.debug(f"Configured error page {path!r} not found")
    return transfer.ok


async def _send_candidates(responder, error_config):
    if error_config.override and await _send_override(
        responder, error_config.override
    ):
        return
    if error_config.configured and await _send_configured(
        responder, error_config.configured
    ):
        return
    raise ConfigurationFallbackExhausted("No configured error page could be read")


async def send_error_page(responder, error_config=None):
    """Writes a 404 error page to an open responder."""
    if error_config is None:
        error_config = ErrorPageConfig()

    responder.status(status_codes.HTTP_404)  # type: ignore[attr-defined]
    try:
        await _send_candidates(responder, error_config)
    except ConfigurationFallbackExhausted:
        responder.set("Content-Type", ERROR_PAGE_CONTENT_TYPE).send(DEFAULT_ERROR_PAGE)

    if not responder.finalized:
        await responder.end()
    return responder
