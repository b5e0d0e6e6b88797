import math
from typing import Any, Mapping, Optional

def as_record(raw: Any) -> Mapping[str, Any]:
    # upstream lists sometimes carry strings or numbers instead of objects
    return raw if isinstance(raw, Mapping) else {}

def text_or_none(value: Any) -> Optional[str]:
    """
    Display text for a raw field, or None when the value counts as absent
    (None, False, "", 0, NaN). Lists and objects are passed through str()
    as they are; the feed only carries scalars in the fields read here.
    """
    if value is None or value is False or value == "" or value == 0:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if value is True:
        return "true"
    return str(value)

def first_text(record: Mapping[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        v = text_or_none(record.get(key))
        if v is not None:
            return v
    return None
