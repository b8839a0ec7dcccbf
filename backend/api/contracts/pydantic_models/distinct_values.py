"""
Pydantic model for /distinct-values endpoint params.

Endpoint: GET /api/distinct-values?field=state (legacy: GET /api/states)
"""

from pydantic import Field

from constants import DEFAULT_DISTINCT_FIELD

from .base import BaseParamsModel


class DistinctValuesParams(BaseParamsModel):
    # Allowed values are checked by SalesQueryService.list_distinct_values
    field: str = Field(
        default=DEFAULT_DISTINCT_FIELD,
        description="SalesRecord attribute to list (state, region, city, ...)",
    )
