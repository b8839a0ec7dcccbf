"""
Pydantic model for /date-range/<region> endpoint params.

The region comes from the URL path. The "All States" sentinel resolves to
None, which means bounds over the whole dataset.

Endpoint: GET /api/date-range/<region> (legacy: GET /api/dateRange/<state>)
"""

from typing import Optional

from .base import BaseParamsModel


class DateRangeParams(BaseParamsModel):
    region: Optional[str] = None
