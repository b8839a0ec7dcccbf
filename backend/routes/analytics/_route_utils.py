"""
Shared route utilities for analytics endpoints.

Goals:
- Structured success/error logs with timing for every analytics route
- Keep endpoint handlers small: validate params, call service, serialize
"""

import functools
import logging
import time
from typing import Any, Callable, Dict, Optional

import pydantic


def route_logger(name: str) -> logging.Logger:
    """Return namespaced logger for analytics routes."""
    return logging.getLogger(f"analytics.{name}")


def elapsed_ms(start_time: float) -> int:
    """Return elapsed milliseconds since a perf_counter() start value."""
    return int((time.perf_counter() - start_time) * 1000)


def log_success(
    logger: logging.Logger,
    route: str,
    start_time: float,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    payload = {"route": route, "elapsed_ms": elapsed_ms(start_time)}
    if details:
        payload.update(details)
    logger.info("route_success %s", payload)


def log_error(
    logger: logging.Logger,
    route: str,
    start_time: float,
    err: Exception,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    payload = {"route": route, "elapsed_ms": elapsed_ms(start_time)}
    if details:
        payload.update(details)
    # Client and expected failures (400/404/503) are logged without a traceback
    if isinstance(err, pydantic.ValidationError):
        status_code = 400
    else:
        status_code = getattr(err, "status_code", 500)
    if status_code < 500:
        logger.warning("route_error %s err=%s", payload, err)
    else:
        logger.error("route_error %s err=%s", payload, err)


def logged_route(name: str) -> Callable:
    """
    Decorator: time the handler and emit route_success / route_error.

    Exceptions are re-raised unchanged so the error envelope handlers
    decide the status code and body.
    """
    logger = route_logger(name)

    def decorator(view: Callable) -> Callable:
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                response = view(*args, **kwargs)
            except Exception as err:
                log_error(logger, name, start, err, details=kwargs or None)
                raise
            log_success(logger, name, start, details=kwargs or None)
            return response
        return wrapper

    return decorator
