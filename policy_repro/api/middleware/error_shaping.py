from __future__ import annotations

import logging
import traceback
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from policy_repro.core.errors import ReproCodeError

log = logging.getLogger("repro.errors")


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


def _with_request_id(payload: dict, rid: str | None) -> dict:
    if rid:
        payload["request_id"] = rid
    return payload


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Outermost error boundary.

    - ReproCodeError (bad reform, period key, region, year, household value)
      becomes 422 {"detail": {"code", "message"}}
    - anything else becomes a bare 500; the traceback is only logged
    - request_id is echoed in both cases when known
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except ReproCodeError as e:
            rid = _request_id(request)
            log.warning("Rejected request: code=%s rid=%s path=%s %s", e.code, rid, request.url.path, e)
            return JSONResponse(
                status_code=422,
                content=_with_request_id({"detail": e.to_detail()}, rid),
            )
        except Exception as e:
            rid = _request_id(request)
            log.error(
                "Unhandled error: %s rid=%s path=%s\n%s",
                str(e),
                rid,
                request.url.path,
                traceback.format_exc(),
            )
            return JSONResponse(
                status_code=500,
                content=_with_request_id({"detail": "Internal Server Error"}, rid),
            )
