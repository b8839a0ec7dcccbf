"""
Error envelope - one JSON shape for every failed request.

    {"error": "State not found", "code": "NOT_FOUND", "requestId": "..."}

"error" stays a plain string because the dashboard client renders it
directly. 400 bodies may add "field" (and "received_value").

    SalesAnalyticsError subclass   status/code from the class (404, 500, 503)
    utils ValidationError          400 INVALID_PARAMS
    pydantic ValidationError       400 INVALID_PARAMS, first error only
    werkzeug HTTPException         its status, code derived from its name
    anything else                  500 INTERNAL_ERROR, traceback logged
"""

import logging
from typing import Optional

import pydantic
from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException

from services.exceptions import SalesAnalyticsError
from utils.normalize import ValidationError, validation_error_response


logger = logging.getLogger('api.middleware.error')

ERROR_CODES = {
    "BAD_REQUEST": 400,
    "INVALID_PARAMS": 400,
    "NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
    "INTERNAL_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def setup_error_handlers(app: Flask) -> None:

    @app.errorhandler(SalesAnalyticsError)
    def handle_sales_error(error: SalesAnalyticsError):
        if error.status_code >= 500:
            # Traceback only when something underneath actually failed
            logger.error(
                "sales_error code=%s status=%s message=%s",
                error.code, error.status_code, error.message,
                exc_info=error if error.__cause__ is not None else None,
            )
        return make_error_response(error.code, error.message, error.status_code)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        return _respond(validation_error_response(error), error.status_code)

    @app.errorhandler(pydantic.ValidationError)
    def handle_params_error(error: pydantic.ValidationError):
        errors = error.errors()
        first = errors[0] if errors else {}
        field = '.'.join(str(part) for part in first.get('loc', ())) or None
        return make_error_response(
            ValidationError.code,
            first.get('msg', 'Invalid parameters'),
            ValidationError.status_code,
            field=field,
        )

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        # "Method Not Allowed" -> "METHOD_NOT_ALLOWED"
        code = error.name.upper().replace(' ', '_')
        return make_error_response(code, error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception(
            "unhandled_error error_type=%s error=%s",
            type(error).__name__, error,
        )
        return make_error_response("INTERNAL_ERROR", "An unexpected error occurred", 500)


def _respond(body: dict, status_code: int):
    request_id = g.get('request_id')
    body["requestId"] = request_id

    response = jsonify(body)
    if request_id:
        response.headers['X-Request-ID'] = request_id
    return response, status_code


def make_error_response(
    code: str,
    message: str,
    status_code: Optional[int] = None,
    field: Optional[str] = None,
):
    """
    Build an enveloped error response.

    Args:
        code: Error code, e.g. "NOT_FOUND"
        message: Text shown by the client
        status_code: HTTP status; looked up in ERROR_CODES when omitted
        field: Offending parameter, for 400s

    Returns:
        (response, status_code) tuple for Flask
    """
    if status_code is None:
        status_code = ERROR_CODES.get(code, 500)

    body = {"error": message, "code": code}
    if field:
        body["field"] = field
    return _respond(body, status_code)
