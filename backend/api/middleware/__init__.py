"""
Global middleware for API requests.

Provides:
- Request ID injection (X-Request-ID) and request-id log filter
- Error envelope standardization
- Sampled request logging
"""

from .request_id import setup_request_id_middleware, RequestIdLogFilter
from .error_envelope import setup_error_handlers
from .request_logging import setup_request_logging_middleware

__all__ = [
    'setup_request_id_middleware',
    'RequestIdLogFilter',
    'setup_error_handlers',
    'setup_request_logging_middleware',
]
