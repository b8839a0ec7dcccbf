"""
Utility modules for the backend.
"""
from .normalize import (
    ValidationError,
    to_date,
    to_str,
    validation_error_response,
)

__all__ = [
    'ValidationError',
    'to_date',
    'to_str',
    'validation_error_response',
]
