"""
Shared Pydantic types for API params.

- CoercedDate: "2016-01-03" / "2016-01-03T00:00:00.000Z" -> date(2016, 1, 3)
"""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator

from utils.normalize import to_date


def coerce_date(v: Any) -> Optional[date]:
    """Parse with utils.normalize.to_date; empty -> None."""
    return to_date(v)


CoercedDate = Annotated[Optional[date], BeforeValidator(coerce_date)]
