"""
Base Pydantic model for all API param schemas.

Key features:
- frozen=True: Immutable after normalization (prevents downstream mutation)
- populate_by_name=True: Accept both alias and field name
- extra='ignore': Ignore undeclared fields (safe)
- region normalized at boundary ("All States" / "" -> None)
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from constants import ALL_STATES
from utils.normalize import to_str


def normalize_region(v: Any, sentinel: str = ALL_STATES) -> Optional[str]:
    """
    Map the "no filter" dropdown value to None.

    Accepts: None, '', the sentinel (case-insensitive), 'all', or a real
    state name. Returns None for "no filter", otherwise the stripped name.
    """
    if v is not None and not isinstance(v, str):
        return v
    key = to_str(v)
    if key is None or key.lower() in (sentinel.lower(), 'all'):
        return None
    return key


class BaseParamsModel(BaseModel):
    """
    Base model for all API param schemas.

    Invariant: after validation, `region` is either a concrete state name
    or None. The sentinel string never reaches the service layer.

    The sentinel can be overridden per call through validation context:
        SummaryParams.model_validate(raw, context={'all_states': 'Everywhere'})
    """
    model_config = ConfigDict(
        frozen=True,  # Immutable after normalization
        str_strip_whitespace=True,  # Strip whitespace from strings
        populate_by_name=True,  # Accept both alias and field name
        extra='ignore',  # Ignore undeclared fields
    )

    @field_validator('region', mode='before', check_fields=False)
    @classmethod
    def normalize_region_sentinel(cls, v, info: ValidationInfo):
        sentinel = (info.context or {}).get('all_states', ALL_STATES)
        return normalize_region(v, sentinel)
