import logging
import os
from pathlib import Path

import uvicorn
from starlette.middleware.errors import ServerErrorMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from starlette.testclient import TestClient

from . import status_codes
from .cache_control import apply_cache_control
from .config import Config, coerce_config
from .endpoints import Endpoint
from .error_pages import ErrorPageConfig, send_error_page
from .statics import DEFAULT_ADDRESS, DEFAULT_PORT, TEXT_CONTENT_TYPE

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("get", "head")


class StaticSite:
    """The static asset server, as an ASGI application.

    Every request is looked up through the Content Provider; a hit is
    streamed back, a miss is answered with the 404 error page. The
    ``Cache-Control`` header is derived from the current configuration.

    :param config: A :class:`~statica.config.Config`, a mapping, a config file
                   path, or a callable returning one of those. A callable is
                   evaluated for every request.
    :param root: Overrides the configured site root.
    :param error_page: Path of an error page overriding the configured one.
    :param debug: Show tracebacks for unhandled errors.
    :param allowed_hosts: Host names to accept; defaults to any.
    """

    status_codes = status_codes

    def __init__(
        self,
        config=None,
        *,
        root=None,
        error_page=None,
        debug=False,
        allowed_hosts=None,
    ):
        if isinstance(config, (str, Path)):
            config = Config.load(config)
        self._config = config
        self.root = root
        self.error_page = error_page
        self.debug = debug

        if not allowed_hosts:
            allowed_hosts = ["*"]
        self.allowed_hosts = allowed_hosts

        # Cached test client.
        self._session = None

        self.endpoint = Endpoint(
            self.serve_static,
            config=self.current_config,
            error_page=self.error_page,
        )
        self.app = self.endpoint
        self.add_middleware(TrustedHostMiddleware, allowed_hosts=self.allowed_hosts)
        self.add_middleware(ServerErrorMiddleware, debug=debug)

    def current_config(self) -> Config:
        """The configuration in effect right now, ``root`` override applied."""
        config = coerce_config(self._config)
        if self.root is not None:
            config = config.replace(root=str(self.root))
        return config

    def add_middleware(self, middleware_cls, **middleware_config):
        self.app = middleware_cls(self.app, **middleware_config)

    async def serve_static(self, req, res):
        if req.method not in ALLOWED_METHODS:
            res.status(status_codes.HTTP_405)  # type: ignore[attr-defined]
            res.set("Allow", ", ".join(m.upper() for m in ALLOWED_METHODS))
            res.set("Content-Type", TEXT_CONTENT_TYPE)
            await res.end("Method Not Allowed")
            return

        apply_cache_control(req, res)

        transfer = await res.send_file(req.path)
        if transfer.ok:
            return

        logger.debug(f"{transfer.error}; sending error page")
        await send_error_page(
            res, ErrorPageConfig.from_config(req.config, override=req.error_page)
        )

    def session(self, base_url="http://testserver"):
        """Testing HTTP client. Returns a Requests-like session, able to send
        HTTP requests to the application.

        :param base_url: The URL to mount the connection adaptor to.
        """

        if self._session is None:
            self._session = TestClient(self, base_url=base_url)
        return self._session

    @property
    def requests(self):
        return self.session()

    def serve(self, *, address=None, port=None, **options):
        """Runs the application with uvicorn. If the ``PORT`` environment
        variable is set, requests will be served on that port automatically to all
        known hosts.

        :param address: The address to bind to.
        :param port: The port to bind to.
        :param options: Additional keyword arguments to send to ``uvicorn.run()``.
        """

        if "PORT" in os.environ:
            if address is None:
                address = "0.0.0.0"
            port = int(os.environ["PORT"])

        if address is None:
            address = DEFAULT_ADDRESS
        if port is None:
            port = DEFAULT_PORT

        logger.info(f"Serving {self.current_config().root} on http://{address}:{port}")
        uvicorn.run(self, host=address, port=port, **options)

    def run(self, **kwargs):
        self.serve(**kwargs)

    async def __call__(self, scope, receive, send):
        await self.app(scope, receive, send)
