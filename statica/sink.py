import logging

from .exceptions import ContractViolation

logger = logging.getLogger(__name__)


class ResponseSink:
    """Outbound half of an ASGI HTTP exchange.

    Status and headers go out once with :meth:`start`, followed by ordered
    body chunks. :meth:`close` sends the final (empty) chunk and may only
    happen once.

    :param send: The ASGI ``send`` callable.
    :param head: If ``True``, body chunks are swallowed (``HEAD`` requests).
    """

    def __init__(self, send, *, head=False):
        self._send = send
        self.head = head
        self.started = False
        self.closed = False
        self.status_code = None

    async def start(self, status_code, headers):
        if self.started:
            raise ContractViolation("Response headers have already been sent")
        self.started = True
        self.status_code = status_code
        await self._send(
            {
                "type": "http.response.start",
                "status": status_code,
                "headers": list(headers),
            }
        )

    async def write(self, chunk, more=True):
        if not self.started:
            raise ContractViolation("Cannot write a body before the headers")
        if self.closed:
            raise ContractViolation("Cannot write to a closed response")
        if not more:
            self.closed = True
        if self.head:
            chunk = b""
            if more:
                return
        await self._send(
            {"type": "http.response.body", "body": chunk, "more_body": more}
        )

    async def close(self):
        await self.write(b"", more=False)
