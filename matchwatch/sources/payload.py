"""
Split a loosely shaped `/scrape` response into live and upcoming lists.

The upstream schema has changed shape several times, so the response is
matched against a fixed, ordered list of variants and the first one that
fits wins:

    1. a bare array                       -> everything is live
    2. `live_matches` / `upcoming_matches` -> mapped directly
    3. a `matches` array                  -> live
    4. exactly one array-valued key       -> that array is live
    5. several array-valued keys          -> keys containing "live" are live,
                                             the rest are upcoming

Anything else yields two empty lists. This never raises.
"""

from typing import Any, List, Tuple

from matchwatch.models.schemas import NormalizedPayload, ResponseShape


def _array_keys(data: dict) -> List[str]:
    return [k for k, v in data.items() if isinstance(v, list)]


def classify_payload(payload: Any) -> ResponseShape:
    if isinstance(payload, list):
        return ResponseShape.ARRAY
    if not isinstance(payload, dict):
        return ResponseShape.EMPTY
    if isinstance(payload.get("live_matches"), list) or isinstance(payload.get("upcoming_matches"), list):
        return ResponseShape.LIVE_UPCOMING
    if isinstance(payload.get("matches"), list):
        return ResponseShape.MATCHES

    keys = _array_keys(payload)
    if len(keys) == 1:
        return ResponseShape.SINGLE_ARRAY
    if len(keys) > 1:
        return ResponseShape.MULTI_ARRAY
    return ResponseShape.EMPTY


def split_payload(payload: Any) -> NormalizedPayload:
    shape = classify_payload(payload)
    live: List[Any] = []
    upcoming: List[Any] = []

    if shape == ResponseShape.ARRAY:
        live = list(payload)
    elif shape == ResponseShape.LIVE_UPCOMING:
        # only one of the two needs to be an array
        if isinstance(payload.get("live_matches"), list):
            live = list(payload["live_matches"])
        if isinstance(payload.get("upcoming_matches"), list):
            upcoming = list(payload["upcoming_matches"])
    elif shape == ResponseShape.MATCHES:
        live = list(payload["matches"])
    elif shape == ResponseShape.SINGLE_ARRAY:
        live = list(payload[_array_keys(payload)[0]])
    elif shape == ResponseShape.MULTI_ARRAY:
        for key in _array_keys(payload):
            if "live" in key:
                live.extend(payload[key])
            else:
                upcoming.extend(payload[key])

    return NormalizedPayload(shape=shape, live=live, upcoming=upcoming)


def normalize(payload: Any) -> Tuple[List[Any], List[Any]]:
    result = split_payload(payload)
    return result.live, result.upcoming
