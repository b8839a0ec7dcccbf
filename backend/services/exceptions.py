"""
Sales analytics error taxonomy.

Each error carries the envelope code and HTTP status it maps to, so the
error handlers in api/middleware/error_envelope.py stay table-driven.
"""


class SalesAnalyticsError(Exception):
    """Base class for expected, request-terminal failures."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataUnavailableError(SalesAnalyticsError):
    """The dataset could not be loaded (missing, corrupt, or empty file)."""

    code = "SERVICE_UNAVAILABLE"
    status_code = 503


class NotFoundError(SalesAnalyticsError):
    """A filter matched no records where a result is required."""

    code = "NOT_FOUND"
    status_code = 404


class AggregationError(SalesAnalyticsError):
    """Unexpected failure while summarizing records."""

    code = "INTERNAL_ERROR"
    status_code = 500
