"""
SalesRecord - one transaction line from the sales data file.

Records are immutable and live only for the duration of a request:
the loader builds them, the filter and aggregator read them.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from constants import COLUMN_TO_FIELD


@dataclass(frozen=True)
class SalesRecord:
    row_id: int
    order_id: str
    order_date: date
    ship_date: Optional[date]
    ship_mode: str
    customer_id: str
    customer_name: str
    segment: str
    country: str
    city: str
    state: str
    postal_code: Optional[int]
    region: str
    product_id: str
    category: str
    sub_category: str
    product_name: str
    sales: float
    quantity: int
    discount: float
    profit: float

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'SalesRecord':
        """
        Build a record from a cleaned row keyed by source column names.

        The loader is responsible for type coercion; this only renames
        columns to attributes.
        """
        return cls(**{field: row.get(column) for column, field in COLUMN_TO_FIELD.items()})

    def to_row(self) -> Dict[str, Any]:
        """Inverse of from_row(), with dates as ISO strings (data file shape)."""
        row = {}
        for column, field in COLUMN_TO_FIELD.items():
            value = getattr(self, field)
            row[column] = value.isoformat() if isinstance(value, date) else value
        return row
