"""
Contract enforcement package.

Request params are validated by the pydantic models in pydantic_models/;
response shapes live in schemas/api_contract.py.
"""

from .pydantic_models import (
    SummaryParams,
    DateRangeParams,
    DistinctValuesParams,
)

__all__ = [
    'SummaryParams',
    'DateRangeParams',
    'DistinctValuesParams',
]
