"""Request correlation id.

Each HTTP request gets an id: the caller's own if it is a short token of
letters, digits, '_' or '-', otherwise a fresh UUID4. The id is echoed on the
response and is visible to every log record emitted while the request runs.
"""

import re
import uuid

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from catechesis.shared.logging import current_request_id

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


def accept_request_id(candidate: str | None) -> str:
    """Return the caller's id when it is safe to log, else a new UUID4 string."""
    if candidate is not None:
        candidate = candidate.strip()
        if _SAFE_REQUEST_ID.fullmatch(candidate):
            return candidate
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Raw ASGI middleware; response bodies pass through untouched."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = accept_request_id(Headers(scope=scope).get(self.header_name))

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message).append(self.header_name, request_id)
            await send(message)

        context_token = current_request_id.set(request_id)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            current_request_id.reset(context_token)
