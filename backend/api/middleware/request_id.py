"""
Request correlation ids.

Every request gets an id in g.request_id, echoed as the X-Request-ID
response header, included in error bodies (error_envelope.py) and stamped
on log records by RequestIdLogFilter so one dashboard load can be traced
across the route, service and loader loggers.
"""

import logging
import re
import uuid
from typing import Optional

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = 'X-Request-ID'

# Client-supplied ids are echoed into headers and logs; keep them boring
_VALID_REQUEST_ID = re.compile(r'[A-Za-z0-9._:-]{1,128}')


def resolve_request_id(supplied: Optional[str]) -> str:
    """Reuse a well-formed client id, otherwise mint a UUID4."""
    if supplied and _VALID_REQUEST_ID.fullmatch(supplied):
        return supplied
    return str(uuid.uuid4())


def setup_request_id_middleware(app: Flask) -> None:

    @app.before_request
    def _assign_request_id():
        g.request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

    @app.after_request
    def _echo_request_id(response):
        request_id = g.get('request_id')
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response


def get_request_id() -> str:
    """Current request id, or '-' outside a request (CLI, startup logs)."""
    if has_request_context():
        return g.get('request_id', '-')
    return '-'


class RequestIdLogFilter(logging.Filter):
    """Attach the current request id to every record as `request_id`."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'request_id'):
            record.request_id = get_request_id()
        return True
