"""
ASGI middleware applied to every request.

- BodySizeLimitMiddleware rejects request bodies above a byte limit, both
  when Content-Length declares it and when a streamed body grows past it.
- SecurityHeadersMiddleware adds the usual hardening response headers.
"""

# Standard library imports
import logging

# External package imports
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-XSS-Protection": "0",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


class RequestBodyTooLarge(HTTPException):
    """Raised while streaming a body that exceeds the configured limit"""
    
    def __init__(self, max_body_bytes: int) -> None:
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Request body exceeds {max_body_bytes} bytes",
        )


class BodySizeLimitMiddleware:
    """Reject request bodies larger than max_body_bytes with HTTP 413"""
    
    def __init__(self, app: ASGIApp, max_body_bytes: int = 1000) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes
    
    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        
        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > self.max_body_bytes:
                await self._reject(scope, receive, send)
                return
        
        received = 0
        response_started = False
        
        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    raise RequestBodyTooLarge(self.max_body_bytes)
            return message
        
        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)
        
        try:
            await self.app(scope, limited_receive, tracking_send)
        except RequestBodyTooLarge:
            # Only reached when the body was read outside a route handler
            if response_started:
                raise
            await self._reject(scope, receive, send)
    
    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        message = f"Request body exceeds {self.max_body_bytes} bytes"
        logger.warning(f"{scope.get('method')} {scope.get('path')}: {message}")
        response = JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content={"error": message},
        )
        await response(scope, receive, send)


class SecurityHeadersMiddleware:
    """Add hardening headers to every HTTP response"""
    
    def __init__(self, app: ASGIApp) -> None:
        self.app = app
    
    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        
        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in SECURITY_HEADERS.items():
                    headers.setdefault(name, value)
            await send(message)
        
        await self.app(scope, receive, send_with_headers)
