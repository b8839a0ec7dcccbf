"""
Data Loading Service - Sales Dataset Reader

This module is responsible for LOADING data only:
- Reading the sales file (JSON array of objects, or CSV with the same headers)
- Best-effort type coercion (numbers, dates)
- Building immutable SalesRecord objects

There is NO cache. Every call re-reads and re-parses the whole file, so an
updated file is picked up by the next request.

Fail-open contract:
  A missing or corrupt file returns an empty list instead of raising.
  The condition is logged as `dataset_unavailable` (vs `dataset_empty` for a
  readable file with no usable rows) so silent data loss shows up in logs.
  Callers that need data (summary) turn the empty list into a 503.

Column handling (source column → SalesRecord attribute, see constants.py):
  Row ID, Quantity                → int     (unparseable or infinite → 0)
  Sales, Discount, Profit         → float   (unparseable or infinite → 0.0)
  Postal Code                     → int     (unparseable → None)
  Order Date                      → date    (unparseable → row dropped)
  Ship Date                       → date    (unparseable → None)
  everything else                 → str     (missing → '')
"""

import logging
import os
import time
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from constants import (
    COLUMN_TO_FIELD, TEXT_COLUMNS, FLOAT_COLUMNS, INT_COLUMNS,
    DATE_COLUMNS, COL_ORDER_DATE, COL_POSTAL_CODE,
)
from models.sales_record import SalesRecord

logger = logging.getLogger('sales.loader')

SUPPORTED_EXTENSIONS = ('.json', '.csv')


def read_sales_file(path: str) -> pd.DataFrame:
    """
    Read the raw sales file into a DataFrame without any type coercion.

    Raises:
        OSError: file missing or unreadable
        ValueError: malformed content or unsupported extension
    """
    suffix = Path(path).suffix.lower()
    if suffix == '.json':
        # dtype/convert_dates off: coercion is done column by column below
        return pd.read_json(
            path, orient='records', dtype=False, convert_dates=False, precise_float=True,
        )
    if suffix == '.csv':
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    raise ValueError(
        f"Unsupported sales file extension {suffix!r}; expected one of {SUPPORTED_EXTENSIONS}"
    )


def _object_column(values: List[Any], index: pd.Index) -> pd.Series:
    # dtype=object keeps None as None (a plain list would become float NaN)
    return pd.Series(values, index=index, dtype=object)


def parse_date(value: Any) -> Optional[date]:
    """
    Parse one date value (ISO date or datetime, M/D/YYYY) to a date.

    Values are parsed one at a time so a file mixing "2016-01-03T00:00:00Z"
    and "2016-01-04" still loads. The calendar date is taken as written,
    timezone suffix ignored. Returns None if parsing fails.
    """
    try:
        ts = pd.to_datetime(value, errors='coerce')
    except (ValueError, TypeError, OverflowError):
        return None
    return ts.date() if isinstance(ts, pd.Timestamp) else None


def _parse_dates(series: pd.Series) -> pd.Series:
    return _object_column([parse_date(value) for value in series.tolist()], series.index)


def _finite_numbers(series: pd.Series) -> pd.Series:
    """to_numeric with unparseable and +/-inf values as NaN."""
    numeric = pd.to_numeric(series, errors='coerce')
    return numeric.where(numeric.abs() != float('inf'))


def clean_sales_data(df: pd.DataFrame) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """
    Coerce raw columns to the SalesRecord types.

    Args:
        df: Raw DataFrame from read_sales_file()

    Returns:
        (cleaned DataFrame with exactly the known columns, diagnostics dict)
    """
    diagnostics = {
        'initial_rows': len(df),
        'missing_columns': [],
        'rejected': {},
    }

    if df.empty:
        return pd.DataFrame(columns=list(COLUMN_TO_FIELD)), diagnostics

    df = df.copy()
    for column in COLUMN_TO_FIELD:
        if column not in df.columns:
            diagnostics['missing_columns'].append(column)
            df[column] = None

    for column in TEXT_COLUMNS:
        df[column] = df[column].fillna('').astype(str).str.strip()

    for column in FLOAT_COLUMNS:
        df[column] = _finite_numbers(df[column]).fillna(0.0).astype(float)

    for column in INT_COLUMNS:
        df[column] = _finite_numbers(df[column]).fillna(0).astype(int)

    postal = _finite_numbers(df[COL_POSTAL_CODE])
    df[COL_POSTAL_CODE] = _object_column([int(v) if pd.notna(v) else None for v in postal], df.index)

    for column in DATE_COLUMNS:
        df[column] = _parse_dates(df[column])

    # Order Date drives date filters and bounds; rows without one are unusable
    before = len(df)
    df = df[df[COL_ORDER_DATE].notna()]
    rejected = before - len(df)
    if rejected > 0:
        diagnostics['rejected']['invalid_order_date'] = rejected

    return df[list(COLUMN_TO_FIELD)], diagnostics


def _iter_rows(df: pd.DataFrame):
    """Yield rows as dicts of native Python values (tolist() unboxes numpy scalars)."""
    columns = list(df.columns)
    values = [df[column].tolist() for column in columns]
    for row in zip(*values):
        yield dict(zip(columns, row))


def load_sales_records(path: Optional[str] = None) -> List[SalesRecord]:
    """
    Load the full sales dataset.

    Args:
        path: Data file path. Defaults to Config.SALES_DATA_PATH.

    Returns:
        List of SalesRecord in file order. Empty list if the file is
        missing, corrupt, or has no usable rows (never raises for those).
    """
    if path is None:
        from config import Config
        path = Config.SALES_DATA_PATH

    start = time.perf_counter()

    # Anything pandas raises while reading or coercing means the file is unusable
    try:
        raw = read_sales_file(path)
        df, diagnostics = clean_sales_data(raw)
    except (OSError, ValueError, TypeError, OverflowError) as e:
        logger.warning(
            "dataset_unavailable path=%s error_type=%s error=%s",
            path, type(e).__name__, e,
        )
        return []

    if diagnostics['missing_columns']:
        logger.warning(
            "dataset_missing_columns path=%s columns=%s",
            path, diagnostics['missing_columns'],
        )

    records = [SalesRecord.from_row(row) for row in _iter_rows(df)]

    if not records:
        logger.warning(
            "dataset_empty path=%s initial_rows=%d rejected=%s",
            path, diagnostics['initial_rows'], diagnostics['rejected'],
        )
        return []

    logger.info(
        "dataset_loaded path=%s records=%d rejected=%s elapsed_ms=%d",
        path, len(records), diagnostics['rejected'],
        int((time.perf_counter() - start) * 1000),
    )
    return records


def describe_dataset(path: Optional[str] = None) -> Dict[str, Any]:
    """File-level facts for health checks (does not parse the file)."""
    if path is None:
        from config import Config
        path = Config.SALES_DATA_PATH

    exists = os.path.isfile(path)
    return {
        'path': path,
        'exists': exists,
        'sizeBytes': os.path.getsize(path) if exists else None,
    }
