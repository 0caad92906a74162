"""Value conversions shared by the engine and the persistence layer."""

from datetime import datetime
from typing import Any, Optional


def enum_to_value(value: Any) -> Any:
    """Return `.value` for enums, the value itself otherwise.

    Pydantic models with `use_enum_values=True` already hold plain strings,
    so both forms show up in practice.
    """
    if hasattr(value, "value"):
        return value.value
    return value


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware datetime to naive local time.

    Naive values are taken to be local already and returned unchanged.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
