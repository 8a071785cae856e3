"""
Response envelope middleware.

Wraps successful JSON responses as::

    {"data": ..., "statusCode": 200, "message": "Success", "timestamp": "..."}

Authentication routes and the API documentation are returned untouched,
as are error responses.
"""

import json
from datetime import datetime, timezone
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

DEFAULT_EXCLUDED_PREFIXES = ("/auth", "/docs", "/redoc", "/openapi.json")


def _utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-15T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResponseEnvelopeMiddleware(BaseHTTPMiddleware):
    """Wraps 2xx JSON responses in the standard envelope."""

    def __init__(self, app: ASGIApp, excluded_prefixes: Iterable[str] = DEFAULT_EXCLUDED_PREFIXES):
        super().__init__(app)
        self.excluded_prefixes = tuple(excluded_prefixes)

    def is_excluded(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix.rstrip("/") + "/")
            for prefix in self.excluded_prefixes
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        if self.is_excluded(request.url.path):
            return response
        if not 200 <= response.status_code < 300:
            return response
        if not response.headers.get("content-type", "").startswith("application/json"):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        data = json.loads(body) if body else None

        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() not in ("content-length", "content-type")
        }
        return JSONResponse(
            content={
                "data": data,
                "statusCode": response.status_code,
                "message": "Success",
                "timestamp": _utc_timestamp(),
            },
            status_code=response.status_code,
            headers=headers,
        )
