"""
Row helpers shared by the analytics modules
"""
import math
from typing import Any, Dict, Iterable, Iterator, Mapping

from lexie_analytics.core.errors import MalformedMetricInput

Row = Mapping[str, Any]


def properties_of(row: Row) -> Dict[str, Any]:
    """Free-form properties of a row; anything that is not a mapping reads as empty"""
    props = row.get("properties")
    return props if isinstance(props, dict) else {}


def rows_of_type(rows: Iterable[Row], event_type: str) -> Iterator[Row]:
    return (row for row in rows if row.get("type") == event_type)


def parse_number(value: Any) -> float:
    """
    Parse a numeric field stored as a number or a numeric string

    Raises:
        MalformedMetricInput: for booleans, non-numeric and non-finite values
    """
    if value is None or isinstance(value, bool):
        raise MalformedMetricInput(f"not a number: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedMetricInput(f"not a number: {value!r}") from e
    if not math.isfinite(number):
        raise MalformedMetricInput(f"not a finite number: {value!r}")
    return number


def mean(values: Iterable[float]) -> float:
    values = list(values)
    return math.fsum(values) / len(values) if values else 0.0
