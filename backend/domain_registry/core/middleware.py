# domain_registry/core/middleware.py
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from domain_registry.core.config import settings


class BodySizeLimitMiddleware:
    """
    Refuse requests whose declared Content-Length exceeds MAX_UPLOAD_BYTES
    before the body is read. Bodies without a length are checked while the
    upload is written to disk.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            headers = dict(scope.get("headers") or [])
            declared = headers.get(b"content-length", b"").decode("latin-1").strip()
            if declared.isdigit() and int(declared) > settings.MAX_UPLOAD_BYTES:
                response = PlainTextResponse(
                    f"request body exceeds {settings.MAX_UPLOAD_BYTES} bytes",
                    status_code=413,
                )
                await response(scope, receive, send)
                return

        await self.app(scope, receive, send)
