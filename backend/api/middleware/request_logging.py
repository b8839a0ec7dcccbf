"""
Request logging middleware - sampled access log for the analytics API.

One `api_request` line per logged request, carrying the query string so a
dashboard report can be replayed from logs:

    api_request method=GET path=/api/summary query=region=Texas endpoint=analytics.summary
                status=200 duration_ms=4.2 request_id=...

Which requests are logged:
  - every response with status >= 500
  - otherwise, paths matching the watchlist (if one is configured)
  - otherwise, a random sample at REQUEST_LOG_SAMPLE_RATE

Settings come from app.config (see config.Config), so tests and
create_app() overrides can change them without touching the environment.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Tuple

from flask import Flask, g, request


logger = logging.getLogger("api.request")


@dataclass(frozen=True)
class RequestLogSettings:
    enabled: bool = True
    sample_rate: float = 0.0
    watchlist: Tuple[str, ...] = ()
    api_prefix: str = "/"

    @classmethod
    def from_config(cls, config: Mapping) -> "RequestLogSettings":
        watchlist = config.get("REQUEST_LOG_ENDPOINTS") or ()
        if isinstance(watchlist, str):
            watchlist = [p.strip() for p in watchlist.split(",")]
        try:
            sample_rate = float(config.get("REQUEST_LOG_SAMPLE_RATE", 0.0))
        except (TypeError, ValueError):
            sample_rate = 0.0
        return cls(
            enabled=bool(config.get("REQUEST_LOG_ENABLED", True)),
            sample_rate=min(max(sample_rate, 0.0), 1.0),
            watchlist=tuple(p for p in watchlist if p),
            api_prefix=config.get("API_PREFIX") or "/",
        )

    def covers(self, path: str) -> bool:
        """True for the prefix itself and paths under it (/api, /api/x; not /apifoo)."""
        prefix = self.api_prefix.rstrip('/')
        return not prefix or path == prefix or path.startswith(prefix + '/')

    def should_log(self, path: str, status_code: int, rand: Callable[[], float] = random.random) -> bool:
        if not self.covers(path):
            return False
        if status_code >= 500:
            return True
        if self.watchlist:
            return path.startswith(self.watchlist)
        if self.sample_rate >= 1:
            return True
        return self.sample_rate > 0 and rand() < self.sample_rate


def setup_request_logging_middleware(app: Flask) -> None:
    """Register the timer and access-log hooks (no-op when disabled)."""
    settings = RequestLogSettings.from_config(app.config)
    if not settings.enabled:
        return

    @app.before_request
    def _start_request_timer():
        g.request_start = time.perf_counter()

    @app.after_request
    def _log_api_request(response):
        if not settings.should_log(request.path, response.status_code):
            return response

        started = g.get("request_start")
        duration_ms = round((time.perf_counter() - started) * 1000, 2) if started else None

        logger.info(
            "api_request method=%s path=%s query=%s endpoint=%s status=%s duration_ms=%s request_id=%s",
            request.method,
            request.path,
            request.query_string.decode("utf-8", "replace"),
            request.endpoint,
            response.status_code,
            duration_ms,
            g.get("request_id"),
        )
        return response
