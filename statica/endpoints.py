import logging
import os
from pathlib import Path

from . import status_codes
from .config import Config, coerce_config
from .models import Request
from .providers import FileSystemProvider
from .responder import Responder
from .sink import ResponseSink

logger = logging.getLogger(__name__)


class Endpoint:
    """ASGI application around a ``handler(req, res)`` coroutine.

    The handler receives a :class:`~statica.models.Request` and a fresh
    :class:`~statica.responder.Responder`. Whatever the handler queued is
    flushed once it returns; a response it never touched goes out empty.

    :param handler: ``async def handler(req, res)``.
    :param provider: Content Provider handed to every Responder. Defaults to a
                     :class:`~statica.providers.FileSystemProvider` on the
                     configured root.
    :param config: Anything :func:`~statica.config.coerce_config` accepts.
    :param error_page: Error page override stored on each request.
    """

    def __init__(self, handler, provider=None, *, config=None, error_page=None):
        if isinstance(config, (str, Path)):
            config = Config.load(config)
        self.handler = handler
        self.provider = provider
        self.config = config
        self.error_page = error_page
        self._providers = {}

    def __repr__(self):
        return f"<Endpoint {self.handler!r}>"

    def provider_for(self, config):
        """The fixed provider, or one serving the configured root."""
        if self.provider is not None:
            return self.provider

        key = (os.path.abspath(config.root), config.index)
        if key not in self._providers:
            self._providers[key] = FileSystemProvider(config.root, index=config.index)
        return self._providers[key]

    async def lifespan(self, scope, receive, send):
        message = await receive()
        assert message["type"] == "lifespan.startup"
        await send({"type": "lifespan.startup.complete"})
        message = await receive()
        assert message["type"] == "lifespan.shutdown"
        await send({"type": "lifespan.shutdown.complete"})

    async def __call__(self, scope, receive, send):
        assert scope["type"] in ("http", "lifespan")

        if scope["type"] == "lifespan":
            await self.lifespan(scope, receive, send)
            return

        request = Request(
            scope,
            receive,
            config=coerce_config(self.config),
            error_page=self.error_page,
        )
        res = Responder(
            res=ResponseSink(send, head=request.method == "head"),
            provider=self.provider_for(request.config),
        )

        await self.handler(request, res)

        if not res.finalized:
            await res.end()

        if status_codes.is_400(res.status_code) or status_codes.is_500(res.status_code):
            logger.debug(f"{request.method.upper()} {request.path} -> {res.status_code}")
