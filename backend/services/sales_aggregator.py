"""
Sales Aggregator - turns a flat list of SalesRecord into dashboard totals.

Pure functions only: no I/O, no logging, no rounding. The same records always
produce the same SalesSummary. Rounding to display precision happens in the
response serializer (schemas/api_contract.py), never here.

Metric definitions
------------------
    total_sales            Σ sales
    quantity_sold          Σ quantity
    total_discount_amount  Σ (sales × discount)
    discount_percentage    total_discount_amount / total_sales × 100
                           (0 when total_sales is 0)
    total_profit           Σ profit (may be negative)

discount_percentage is the SALES-WEIGHTED discount rate, not the mean of the
Discount column: a 20% discount on a $1000 line counts ten times more than a
20% discount on a $100 line.

Groupings
---------
    sales_by_city / sales_by_category / sales_by_segment
        key → Σ sales (dict; key order not significant)
    sales_by_sub_category
        [(name, Σ sales), ...] in first-encounter order (NOT sorted)
    top_products
        [(product name, Σ sales), ...] sorted descending, first `top_n`.
        Ties keep first-encounter order (stable sort).
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from constants import TOP_PRODUCTS_LIMIT
from models.sales_record import SalesRecord


@dataclass(frozen=True)
class SalesSummary:
    """Full-precision summary of a filtered record set."""
    record_count: int = 0
    total_sales: float = 0.0
    quantity_sold: int = 0
    total_discount_amount: float = 0.0
    discount_percentage: float = 0.0
    total_profit: float = 0.0
    sales_by_city: Dict[str, float] = field(default_factory=dict)
    top_products: List[Tuple[str, float]] = field(default_factory=list)
    sales_by_category: Dict[str, float] = field(default_factory=dict)
    sales_by_sub_category: List[Tuple[str, float]] = field(default_factory=list)
    sales_by_segment: Dict[str, float] = field(default_factory=dict)


def group_sales_by(
    records: Iterable[SalesRecord],
    key: Callable[[SalesRecord], str],
) -> Dict[str, float]:
    """Σ sales per key, keys in first-encounter order."""
    totals: Dict[str, float] = {}
    for record in records:
        k = key(record)
        totals[k] = totals.get(k, 0.0) + record.sales
    return totals


def top_n_by_value(totals: Dict[str, float], n: int) -> List[Tuple[str, float]]:
    """Largest `n` entries by value, descending; ties keep insertion order."""
    if n <= 0:
        return []
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def discount_percentage(total_discount_amount: float, total_sales: float) -> float:
    if total_sales == 0:
        return 0.0
    return total_discount_amount / total_sales * 100


def summarize(records: Sequence[SalesRecord], top_n: int = TOP_PRODUCTS_LIMIT) -> SalesSummary:
    """
    Aggregate records into a SalesSummary.

    Args:
        records: Already-filtered records (may be empty)
        top_n: Number of products to keep in top_products

    Returns:
        SalesSummary with unrounded values. Empty input gives all zeros and
        empty groupings.
    """
    total_sales = 0.0
    quantity_sold = 0
    total_discount_amount = 0.0
    total_profit = 0.0

    for record in records:
        total_sales += record.sales
        quantity_sold += record.quantity
        total_discount_amount += record.sales * record.discount
        total_profit += record.profit

    return SalesSummary(
        record_count=len(records),
        total_sales=total_sales,
        quantity_sold=quantity_sold,
        total_discount_amount=total_discount_amount,
        discount_percentage=discount_percentage(total_discount_amount, total_sales),
        total_profit=total_profit,
        sales_by_city=group_sales_by(records, lambda r: r.city),
        top_products=top_n_by_value(group_sales_by(records, lambda r: r.product_name), top_n),
        sales_by_category=group_sales_by(records, lambda r: r.category),
        sales_by_sub_category=list(group_sales_by(records, lambda r: r.sub_category).items()),
        sales_by_segment=group_sales_by(records, lambda r: r.segment),
    )
