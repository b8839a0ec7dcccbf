"""
API Contract Schema - Single Source of Truth

Defines the stable response shapes between backend and dashboard client.
- Response fields: camelCase (totalSales, salesByCity, minDate)
- Rounding happens HERE and only here; services return full precision.

The contract version is sent as X-API-Contract-Version on every analytics
response. Bump it when a response shape changes.
"""

import math
from typing import Any, Dict, List

from constants import DISCOUNT_PERCENT_DECIMALS

# =============================================================================
# API CONTRACT VERSIONING
# =============================================================================

CURRENT_API_CONTRACT_VERSION = "v1"

# HTTP Header name for contract version (debugging via Network tab)
API_CONTRACT_HEADER = 'X-API-Contract-Version'


# =============================================================================
# FIELD NAMES
# =============================================================================

class SummaryFields:
    """Field names for the summary response."""
    TOTAL_SALES = 'totalSales'
    QUANTITY_SOLD = 'quantitySold'
    DISCOUNT_PERCENTAGE = 'discountPercentage'
    TOTAL_PROFIT = 'totalProfit'
    SALES_BY_CITY = 'salesByCity'
    SALES_BY_PRODUCTS = 'salesByProducts'
    SALES_BY_CATEGORY = 'salesByCategory'
    SALES_BY_SUB_CATEGORY = 'salesBySubCategory'
    SALES_BY_SEGMENT = 'salesBySegment'

    ALL = [
        TOTAL_SALES, QUANTITY_SOLD, DISCOUNT_PERCENTAGE, TOTAL_PROFIT,
        SALES_BY_CITY, SALES_BY_PRODUCTS, SALES_BY_CATEGORY,
        SALES_BY_SUB_CATEGORY, SALES_BY_SEGMENT,
    ]


class DateRangeFields:
    MIN_DATE = 'minDate'
    MAX_DATE = 'maxDate'


# =============================================================================
# ROUNDING (presentation boundary)
# =============================================================================

def round_half_up(value: float, decimals: int = 0):
    """
    Round with halves going toward +inf (the client's Math.round behavior).

    Python's round() is banker's rounding (round(2.5) == 2), which would
    shift stat cards by one against the historical dashboard.

    Returns int when decimals == 0, else float.
    """
    factor = 10 ** decimals
    rounded = math.floor(value * factor + 0.5)
    if decimals == 0:
        return int(rounded)
    return rounded / factor


# =============================================================================
# SERIALIZERS
# =============================================================================

def serialize_summary(summary) -> Dict[str, Any]:
    """
    Serialize a SalesSummary to the dashboard response shape.

    Totals are rounded for stat cards; grouped values stay unrounded so
    chart tooltips and the client's own formatting see exact sums.
    """
    return {
        SummaryFields.TOTAL_SALES: round_half_up(summary.total_sales),
        SummaryFields.QUANTITY_SOLD: int(summary.quantity_sold),
        SummaryFields.DISCOUNT_PERCENTAGE: round_half_up(
            summary.discount_percentage, DISCOUNT_PERCENT_DECIMALS
        ),
        SummaryFields.TOTAL_PROFIT: round_half_up(summary.total_profit),
        SummaryFields.SALES_BY_CITY: dict(summary.sales_by_city),
        SummaryFields.SALES_BY_PRODUCTS: [
            {'name': name, 'sales': sales} for name, sales in summary.top_products
        ],
        SummaryFields.SALES_BY_CATEGORY: dict(summary.sales_by_category),
        SummaryFields.SALES_BY_SUB_CATEGORY: [
            {'name': name, 'value': value} for name, value in summary.sales_by_sub_category
        ],
        SummaryFields.SALES_BY_SEGMENT: dict(summary.sales_by_segment),
    }


def serialize_date_bounds(bounds) -> Dict[str, str]:
    """Serialize DateBounds as calendar dates (YYYY-MM-DD, no time part)."""
    return {
        DateRangeFields.MIN_DATE: bounds.min_date.isoformat(),
        DateRangeFields.MAX_DATE: bounds.max_date.isoformat(),
    }


def serialize_distinct_values(values: List[str]) -> List[str]:
    """Distinct values are returned as a bare JSON array."""
    return [str(v) for v in values]
