import logging
import json
import time
import random
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Wide events go to their own logger so they can be routed separately from
# the application log; they are not propagated to the root logger.
structured_logger = logging.getLogger("api.structured_log")
structured_logger.propagate = False

if not structured_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))  # message is already JSON
    structured_logger.addHandler(handler)
    structured_logger.setLevel(logging.INFO)


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    One JSON event per request, tail-sampled:

    1. server errors (status >= 500) are always logged
    2. slow requests (> SLOW_THRESHOLD_MS) are always logged
    3. recipe searches that had to fall back to generated recipes are always logged
    4. everything else is sampled at SAMPLE_RATE
    """

    SLOW_THRESHOLD_MS = 500
    SAMPLE_RATE = 0.05
    ALWAYS_LOGGED_SOURCES = {"generated", "failsafe"}

    def should_log(self, status_code: int, duration_ms: float, recipe_source) -> bool:
        if status_code >= 500:
            return True
        if duration_ms > self.SLOW_THRESHOLD_MS:
            return True
        if recipe_source in self.ALWAYS_LOGGED_SOURCES:
            return True
        return random.random() < self.SAMPLE_RATE

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = None
        error_details = None
        status_code = 500  # Stays 500 if the handler raises

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            error_details = str(e)
            raise
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            state = request.state
            recipe_source = getattr(state, "recipe_source", None)

            if self.should_log(status_code, duration_ms, recipe_source):
                user = getattr(state, "user", None)
                log_payload = {
                    "timestamp": time.time(),
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 2),
                    "client_ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                    "query_params": dict(request.query_params),
                    "error": error_details,
                    "user_id": str(user.id) if user is not None else None,
                    "username": user.username if user is not None else None,
                    "recipe_source": recipe_source,
                    "recipe_count": getattr(state, "recipe_count", None),
                }
                structured_logger.info(json.dumps(log_payload))

        return response
