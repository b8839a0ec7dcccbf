# API Schema Contract Package
from .api_contract import (
    API_CONTRACT_HEADER,
    CURRENT_API_CONTRACT_VERSION,
    SummaryFields,
    DateRangeFields,
    round_half_up,
    serialize_summary,
    serialize_date_bounds,
    serialize_distinct_values,
)

__all__ = [
    'API_CONTRACT_HEADER',
    'CURRENT_API_CONTRACT_VERSION',
    'SummaryFields',
    'DateRangeFields',
    'round_half_up',
    'serialize_summary',
    'serialize_date_bounds',
    'serialize_distinct_values',
]
