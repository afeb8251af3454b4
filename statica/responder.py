import inspect
import json
import logging
import typing as t
from collections.abc import Mapping

from . import status_codes
from .content_types import CONTENT_TYPES, lookup
from .exceptions import ContractViolation, ResourceNotFound
from .models import ResponseDraft
from .statics import (
    DEFAULT_ENCODING,
    HTML_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
)

logger = logging.getLogger(__name__)


def _serializable(value):
    """Drops the parts of ``value`` that JSON cannot represent.

    Mapping entries holding functions, sets and other unsupported objects are
    removed, as are entries whose key is not a JSON scalar. Inside sequences
    unsupported items become ``None``.
    """
    if isinstance(value, Mapping):
        cleaned = {}
        for key, item in value.items():
            if not (key is None or isinstance(key, _SCALARS)):
                continue
            item = _serializable(item)
            if item is not _DROP:
                cleaned[key] = item
        return cleaned
    if isinstance(value, (list, tuple)):
        items = (_serializable(item) for item in value)
        return [None if item is _DROP else item for item in items]
    if value is None or isinstance(value, _SCALARS):
        return value
    return _DROP


_DROP = object()
_SCALARS = (str, int, float, bool)


def encode_json(value) -> bytes:
    value = _serializable(value)
    if value is _DROP:
        value = None
    return json.dumps(value, separators=(",", ":")).encode(DEFAULT_ENCODING)


class FileTransfer:
    """The outcome of a :meth:`Responder.send_file` call.

    Exactly one of ``resolved`` and ``error`` is set. ``headers_sent`` turns
    ``True`` after the ``on_headers`` hook returned, right before the first
    body byte is written.
    """

    __slots__ = [
        "path",
        "resolved",
        "content_type",
        "content_length",
        "error",
        "headers_sent",
    ]

    def __init__(self, path):
        self.path = path
        self.resolved = None
        self.content_type: t.Optional[str] = None
        self.content_length: t.Optional[int] = None
        self.error: t.Optional[ResourceNotFound] = None
        self.headers_sent = False

    def __repr__(self):
        state = "ok" if self.ok else "error"
        return f"<FileTransfer {self.path!r} {state}>"

    @property
    def ok(self):
        return self.error is None


class Responder:
    """Builds the response for a single request.

    Every mutating method returns the responder itself, so calls chain::

        res.status(200).ext("js").send('console.log("hi")')

    :param res: The outbound :class:`~statica.sink.ResponseSink`.
    :param provider: The Content Provider used by :meth:`send_file`.
    :param content_types: The extension table used for inference.
    """

    __slots__ = ["res", "provider", "content_types", "draft"]

    def __init__(self, res=None, provider=None, *, content_types=CONTENT_TYPES):
        if res is None:
            raise ContractViolation("Responder requires a response sink (res)")
        if provider is None:
            raise ContractViolation("Responder requires a content provider")

        self.res = res
        self.provider = provider
        self.content_types = content_types
        self.draft = ResponseDraft()

    def __repr__(self):
        return f"<Responder [{self.draft.status_code}]>"

    @property
    def queued(self):
        return self.draft.queued

    @property
    def finalized(self):
        return self.draft.finalized

    @property
    def status_code(self):
        return self.draft.status_code

    @property
    def content_type(self):
        return self.draft.content_type

    @property
    def headers(self):
        return self.draft.headers

    def status(self, code):
        self.draft.set_status(code)
        return self

    def set(self, name, value):
        if name.lower() == "content-type":
            self.draft.set_content_type(value, explicit=True)
        else:
            self.draft.set_header(name, value)
        return self

    def get(self, name, default=None):
        if name.lower() == "content-type":
            return self.draft.content_type or default
        return self.draft.headers.get(name, default)

    def ext(self, value):
        """Sets the content type from an extension or a file name."""
        self.draft.set_content_type(
            lookup(value, self.content_types), explicit=True
        )
        return self

    def send(self, payload):
        """Queues an in-memory body.

        Text and bytes default to HTML; anything else is sent as JSON.
        """
        if isinstance(payload, str):
            body = payload.encode(DEFAULT_ENCODING)
            default_type = HTML_CONTENT_TYPE
        elif isinstance(payload, (bytes, bytearray)):
            body = bytes(payload)
            default_type = HTML_CONTENT_TYPE
        else:
            body = encode_json(payload)
            default_type = JSON_CONTENT_TYPE

        self.draft.queue(body)
        self.draft.set_content_type(default_type)
        self.draft.set_header("Content-Length", len(body))
        return self

    def redirect(self, location, code=status_codes.HTTP_301):  # type: ignore[attr-defined]
        """Queues a redirect. The response can no longer be changed afterwards."""
        self.draft.ensure_mutable()
        if self.draft.queued:
            raise ContractViolation("A response body has already been sent")

        self.draft.set_status(code)
        self.draft.set_header("Location", location)
        self.draft.set_content_type(TEXT_CONTENT_TYPE, explicit=True)
        self.send(f"Redirecting to {location} ...")
        self.draft.locked = True
        return self

    async def send_file(self, path, *, on_headers=None):
        """Resolves ``path`` through the provider and streams it.

        Returns a :class:`FileTransfer`. A missing file sets the status to 404
        and leaves the response open, so the caller can send something else.

        :param on_headers: Called with the transfer once content type and
                           length are known and before any body byte is
                           written. Headers may still be changed from it.
                           May be a coroutine function.
        """
        self.draft.ensure_mutable()
        if self.draft.queued:
            raise ContractViolation("A response body has already been sent")

        transfer = FileTransfer(path)
        resolved = await self.provider.resolve(path)

        if resolved is None:
            transfer.error = ResourceNotFound(path)
            self.draft.set_status(status_codes.HTTP_404)  # type: ignore[attr-defined]
            return transfer

        transfer.resolved = resolved
        self.draft.queue(resolved)
        self.draft.set_content_type(lookup(resolved.name, self.content_types))
        self.draft.set_header("Content-Length", resolved.size)
        transfer.content_type = self.draft.content_type
        transfer.content_length = resolved.size

        if on_headers is not None:
            result = on_headers(transfer)
            if inspect.isawaitable(result):
                await result
        transfer.headers_sent = True

        await self._flush()
        return transfer

    async def end(self, body=None):
        """Finalizes the response, optionally sending ``body`` first."""
        if body is not None:
            self.send(body)
        self.draft.ensure_open()
        if not self.draft.queued:
            self.draft.queue(b"")
        await self._flush()
        return self

    async def _flush(self):
        draft = self.draft
        draft.locked = False
        body = draft.body
        if isinstance(body, bytes) and "Content-Length" not in draft.headers:
            draft.set_header("Content-Length", len(body))

        draft.finalized = True
        await self.res.start(draft.status_code, draft.raw_headers())

        if isinstance(body, bytes):
            await self.res.write(body, more=False)
            return

        if getattr(self.res, "head", False):
            await self.res.close()
            return

        async for chunk in body.stream():
            await self.res.write(chunk)
        await self.res.close()
