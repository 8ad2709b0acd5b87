import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from donation_api.core.logging import get_logger, request_id_ctx

logger = get_logger("donation_api.access")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        ctx_token = request_id_ctx.set(request_id)
        start = time.time()
        entry = {
            "method": request.method,
            "path": request.url.path,
            "ip": request.client.host if request.client else None,
        }
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed", **entry, latency_ms=int((time.time() - start) * 1000)
            )
            raise
        else:
            logger.info(
                "request", **entry, status=response.status_code,
                latency_ms=int((time.time() - start) * 1000),
            )
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            request_id_ctx.reset(ctx_token)
