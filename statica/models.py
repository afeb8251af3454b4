import typing as t

import rfc3986
from requests.structures import CaseInsensitiveDict
from starlette.requests import Request as StarletteRequest
from starlette.requests import State

from . import status_codes
from .exceptions import ContractViolation


class Request:
    __slots__ = [
        "_starlette",
        "_headers",
        "config",
        "error_page",
    ]

    def __init__(self, scope, receive, config=None, error_page=None):
        self._starlette = StarletteRequest(scope, receive)
        #: The site :class:`~statica.config.Config` in effect for this request.
        self.config = config
        #: Error page path overriding the one declared in ``config``.
        self.error_page = error_page

        headers: CaseInsensitiveDict = CaseInsensitiveDict()
        for key, value in self._starlette.headers.items():
            headers[key] = value

        self._headers = headers

    @property
    def headers(self):
        """A case-insensitive dictionary, containing all headers sent in the Request."""
        return self._headers

    @property
    def method(self):
        """The incoming HTTP method used for the request, lower-cased."""
        return self._starlette.method.lower()

    @property
    def full_url(self):
        """The full URL of the Request, query parameters and all."""
        return str(self._starlette.url)

    @property
    def url(self):
        """The parsed URL of the Request."""
        return rfc3986.urlparse(self.full_url)

    @property
    def path(self):
        """The decoded path portion of the URL, always starting with ``/``."""
        path = self._starlette.scope["path"]
        return path if path.startswith("/") else f"/{path}"

    @property
    def state(self) -> State:
        """
        Use the state to store additional information.

        Usage: ``request.state.time_started = time.time()``
        """
        return self._starlette.state


class ResponseDraft:
    """The in-progress response of a single request.

    Owned by one :class:`~statica.responder.Responder`. Once ``finalized`` is
    set the bytes are on their way to the client and every mutation raises
    :class:`~statica.exceptions.ContractViolation`. A ``locked`` draft rejects
    mutation the same way but can still be flushed.
    """

    __slots__ = [
        "status_code",
        "content_type",
        "explicit_type",
        "headers",
        "body",
        "queued",
        "locked",
        "finalized",
    ]

    def __init__(self):
        self.status_code: int = status_codes.HTTP_200  # type: ignore[attr-defined]
        self.content_type: t.Optional[str] = None
        #: ``True`` once the content type was chosen through ``ext()``.
        self.explicit_type = False
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict()
        #: Either ``bytes`` or a provider file with an async ``stream()``.
        self.body: t.Any = None
        self.queued = False
        #: Set by a redirect: status, headers and body are final, only the
        #: flush is left.
        self.locked = False
        self.finalized = False

    def ensure_open(self):
        if self.finalized:
            raise ContractViolation(
                "The response has already been sent and can no longer be modified"
            )

    def ensure_mutable(self):
        self.ensure_open()
        if self.locked:
            raise ContractViolation(
                "The response is final and can no longer be modified"
            )

    def set_content_type(self, content_type, *, explicit=False):
        self.ensure_mutable()
        if self.explicit_type and not explicit:
            return
        self.content_type = content_type
        self.explicit_type = self.explicit_type or explicit

    def set_header(self, name, value):
        self.ensure_mutable()
        self.headers[name] = str(value)

    def set_status(self, status_code):
        self.ensure_mutable()
        self.status_code = int(status_code)

    def queue(self, body):
        self.ensure_mutable()
        if self.queued:
            raise ContractViolation("A response body has already been sent")
        self.body = body
        self.queued = True

    def raw_headers(self):
        """Headers as ``(name, value)`` byte pairs, ``Content-Type`` included."""
        headers = CaseInsensitiveDict(self.headers)
        if self.content_type is not None:
            headers["Content-Type"] = self.content_type
        return [
            (key.lower().encode("latin-1"), value.encode("latin-1"))
            for key, value in headers.items()
        ]
