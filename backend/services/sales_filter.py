"""
Filter stage for sales records.

Two independent predicates applied in one pass:
- state:     equality on SalesRecord.state; None means "all states"
- date range: inclusive on SalesRecord.order_date, only when BOTH bounds are
              given. date_from > date_to matches nothing (bounds are not swapped).

The legacy "All States" dropdown value is NOT handled here. It is mapped to
None at the request boundary (api/contracts/pydantic_models/base.py) so a real
state with that name could never be silently treated as "no filter".
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from models.sales_record import SalesRecord


@dataclass(frozen=True)
class SalesFilter:
    """Normalized filter state for one request."""
    state: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @property
    def has_date_range(self) -> bool:
        return self.date_from is not None and self.date_to is not None

    def matches(self, record: SalesRecord) -> bool:
        if self.state is not None and record.state != self.state:
            return False
        if self.has_date_range and not (self.date_from <= record.order_date <= self.date_to):
            return False
        return True

    def describe(self) -> dict:
        """Filter values for logs and response meta."""
        return {
            'state': self.state,
            'date_from': self.date_from.isoformat() if self.date_from else None,
            'date_to': self.date_to.isoformat() if self.date_to else None,
            'date_filter_applied': self.has_date_range,
        }


def filter_records(
    records: Iterable[SalesRecord],
    state: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> List[SalesRecord]:
    """Return the records matching all given filters, in input order."""
    return apply_filter(records, SalesFilter(state=state, date_from=date_from, date_to=date_to))


def apply_filter(records: Iterable[SalesRecord], sales_filter: SalesFilter) -> List[SalesRecord]:
    return [record for record in records if sales_filter.matches(record)]
