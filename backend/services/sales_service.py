"""
Sales Query Service - the three dashboard read operations.

    list_distinct_values(field)           unique values of a categorical field
    get_date_bounds(state)                min/max order date for a state
    get_summary(state, date_from, date_to) filtered SalesSummary

Every call reloads the dataset through the injected loader; nothing is kept
between calls. Error mapping:

    loader returns []          → DataUnavailableError (summary only)
    state matches nothing      → NotFoundError (date bounds only)
    filter excludes everything → all-zero summary, NOT an error
    summarize() raises         → AggregationError (cause chained)
"""

import logging
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence

from constants import DISTINCT_VALUE_FIELDS, DEFAULT_DISTINCT_FIELD, TOP_PRODUCTS_LIMIT
from models.sales_record import SalesRecord
from services.data_loader import load_sales_records
from services.exceptions import AggregationError, DataUnavailableError, NotFoundError
from services.sales_aggregator import SalesSummary, summarize
from services.sales_filter import SalesFilter, apply_filter
from utils.normalize import ValidationError

logger = logging.getLogger('sales.service')

Loader = Callable[[], Sequence[SalesRecord]]


@dataclass(frozen=True)
class DateBounds:
    min_date: date
    max_date: date


class SalesQueryService:
    """
    Stateless facade over loader → filter → aggregator.

    Usage:
        service = SalesQueryService(loader=lambda: load_sales_records(path))
        summary = service.get_summary(state='Texas')
    """

    def __init__(self, loader: Optional[Loader] = None, top_n: int = TOP_PRODUCTS_LIMIT):
        self._loader = loader or load_sales_records
        self._top_n = top_n

    def _load(self) -> Sequence[SalesRecord]:
        return self._loader()

    def count_records(self) -> int:
        """Number of usable records in the dataset (0 when unavailable)."""
        return len(self._load())

    def list_distinct_values(self, field: str = DEFAULT_DISTINCT_FIELD) -> List[str]:
        """
        Unique values of `field` in first-encounter order.

        Raises:
            ValidationError: field is not a filterable dimension
        """
        if field not in DISTINCT_VALUE_FIELDS:
            raise ValidationError(
                f"Expected one of {list(DISTINCT_VALUE_FIELDS)}, got: {field!r}",
                field='field',
                received_value=field,
            )
        seen = {}
        for record in self._load():
            seen.setdefault(getattr(record, field), None)
        return list(seen)

    def get_date_bounds(self, state: Optional[str] = None) -> DateBounds:
        """
        Earliest and latest order date among records of `state` (None = all).

        Raises:
            NotFoundError: no records match
        """
        records = apply_filter(self._load(), SalesFilter(state=state))
        if not records:
            raise NotFoundError("State not found" if state is not None else "No sales data available")

        order_dates = [record.order_date for record in records]
        return DateBounds(min_date=min(order_dates), max_date=max(order_dates))

    def get_summary(
        self,
        state: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> SalesSummary:
        """
        Filtered summary.

        Raises:
            DataUnavailableError: the dataset itself is empty/unavailable
            AggregationError: unexpected failure while summarizing
        """
        start = time.perf_counter()
        sales_filter = SalesFilter(state=state, date_from=date_from, date_to=date_to)

        records = self._load()
        if not records:
            raise DataUnavailableError("No sales data available")

        filtered = apply_filter(records, sales_filter)

        try:
            summary = summarize(filtered, top_n=self._top_n)
        except Exception as e:
            raise AggregationError("Failed to process dashboard data") from e

        logger.info(
            "summary_computed filters=%s loaded=%d matched=%d elapsed_ms=%d",
            sales_filter.describe(), len(records), len(filtered),
            int((time.perf_counter() - start) * 1000),
        )
        return summary
