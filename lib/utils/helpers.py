"""General helper utilities."""

import datetime as dt
import math
from typing import Any, List, Optional


def route_segments(route_path: str) -> List[str]:
    """Split a route path such as ``/a/b`` into ``["a", "b"]``.

    ``"/"`` yields an empty list.  Doubled and trailing slashes do not
    produce empty segments.
    """

    if route_path == "/":
        return []
    rel = route_path[1:] if route_path.startswith("/") else route_path
    return [seg for seg in rel.split("/") if seg]


def last_segment(route_path: str) -> Optional[str]:
    segs = route_segments(route_path)
    return segs[-1] if segs else None


def text_of(value: Any) -> str:
    """Render a scalar field value as text.

    Booleans and null use their YAML/JSON spelling, integral floats drop the
    fractional part and dates are rendered in ISO-8601.
    """

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    return str(value)
