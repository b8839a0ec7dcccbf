"""
Input normalization for request and CLI values.

Everything that turns an external string into a typed value goes through
here, so a bad value always surfaces as the same ValidationError (and the
same 400 body) no matter which endpoint received it.

    to_date("2016-01-03")                   -> date(2016, 1, 3)
    to_date("2016-01-03T00:00:00.000Z")     -> date(2016, 1, 3)   # Date.toISOString()
    to_date("")                             -> None
    to_str("  Texas ")                      -> "Texas"
"""

from datetime import date, datetime
from typing import Any, Optional


class ValidationError(ValueError):
    """A request value could not be normalized. Rendered as 400 INVALID_PARAMS."""

    code = "INVALID_PARAMS"
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None, received_value: Any = None):
        super().__init__(message)
        self.field = field
        self.received_value = received_value


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date_text(text: str) -> date:
    # Plain calendar date first; anything longer must be an ISO datetime.
    if len(text) == 10:
        return datetime.strptime(text, "%Y-%m-%d").date()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def to_date(value: Any, *, default: Optional[date] = None, field: Optional[str] = None) -> Optional[date]:
    """
    Normalize a date parameter.

    The date part of an ISO datetime is kept as-is (no timezone shift), which
    is what the legacy client means when it sends toISOString() of midnight.

    Raises:
        ValidationError: value is neither blank nor a recognizable date
    """
    if _is_blank(value):
        return default
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return _parse_date_text(str(value).strip())
    except ValueError:
        raise ValidationError(
            f"Expected date (YYYY-MM-DD), got {type(value).__name__}: {value!r}",
            field=field,
            received_value=value,
        ) from None


def to_str(value: Any, *, default: Optional[str] = None, strip: bool = True) -> Optional[str]:
    """Normalize a text parameter; blank input gives `default`."""
    if _is_blank(value):
        return default
    text = str(value)
    return text.strip() if strip else text


def validation_error_response(error: ValidationError) -> dict:
    """Error body for a ValidationError (the envelope adds requestId)."""
    body = {"error": str(error), "code": error.code}
    if error.field:
        body["field"] = error.field
    if error.received_value is not None:
        body["received_value"] = str(error.received_value)
    return body
