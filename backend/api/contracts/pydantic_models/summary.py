"""
Pydantic model for /summary endpoint params.

Accepts both the current names and the legacy dashboard client names:

    region | state        state filter ("All States" -> None)
    from   | startDate    inclusive start of order-date range
    to     | endDate      inclusive end of order-date range

The date filter only applies when BOTH bounds are present; a single bound
is accepted and ignored downstream (see services/sales_filter.py).

Endpoint: GET /api/summary (legacy: GET /api/dashboard)
"""

from typing import Optional

from pydantic import AliasChoices, Field

from .base import BaseParamsModel
from .types import CoercedDate


class SummaryParams(BaseParamsModel):
    """
    Usage:
        params = SummaryParams.model_validate(request.args.to_dict())
        service.get_summary(params.region, params.date_from, params.date_to)
    """
    region: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices('region', 'state'),
        description="State filter",
    )
    date_from: CoercedDate = Field(
        default=None,
        validation_alias=AliasChoices('from', 'startDate', 'date_from'),
        description="Start date (inclusive)",
    )
    date_to: CoercedDate = Field(
        default=None,
        validation_alias=AliasChoices('to', 'endDate', 'date_to'),
        description="End date (inclusive)",
    )
