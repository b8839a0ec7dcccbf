"""
Pydantic models for API param validation.

Key features:
- Frozen models (immutable after normalization)
- Auto type coercion with clear error messages
- Legacy parameter names accepted through validation aliases

Usage:
    from api.contracts.pydantic_models import SummaryParams

    params = SummaryParams.model_validate(request.args.to_dict())
"""

from .base import BaseParamsModel, normalize_region
from .summary import SummaryParams
from .date_range import DateRangeParams
from .distinct_values import DistinctValuesParams

__all__ = [
    'BaseParamsModel',
    'normalize_region',
    'SummaryParams',
    'DateRangeParams',
    'DistinctValuesParams',
]
