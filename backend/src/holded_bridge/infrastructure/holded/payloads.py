"""Payload helpers shared by the Holded client, the routes and the card rules."""

import math
from collections.abc import Mapping
from typing import Any

from holded_bridge.shared.exceptions import ValidationError


def is_empty(value: Any) -> bool:
    """True for None and for values whose string form is empty.

    ``False`` and ``0`` are real values and are kept.
    """
    return value is None or str(value) == ""


def strip_empty(values: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop None/empty-string entries. Applying it twice changes nothing."""
    if not values:
        return {}
    return {key: value for key, value in values.items() if not is_empty(value)}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query_params(filters: Mapping[str, Any] | None) -> dict[str, str]:
    """Turn a filter mapping into query parameters, skipping empty values."""
    return {key: _stringify(value) for key, value in strip_empty(filters).items()}


def coerce_number(value: Any, field: str) -> int | float:
    """Coerce a JSON/query value to a number (``"3600"`` -> ``3600``)."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", details={"field": field})

    number: int | float
    if isinstance(value, int | float):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise ValidationError(
                    f"{field} must be a number",
                    details={"field": field, "value": str(value)},
                ) from None

    if isinstance(number, float):
        if not math.isfinite(number):
            raise ValidationError(f"{field} must be a number", details={"field": field})
        if number.is_integer():
            return int(number)
    return number


def coerce_bool(value: Any) -> bool:
    """``True``/``"true"`` (any case) -> True, everything else -> False."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
