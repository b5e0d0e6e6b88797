from enum import Enum
from typing import Any, List
from pydantic import BaseModel, ConfigDict
from datetime import datetime

class ResponseShape(str, Enum):
    ARRAY = "array"
    LIVE_UPCOMING = "live_upcoming"
    MATCHES = "matches"
    SINGLE_ARRAY = "single_array"
    MULTI_ARRAY = "multi_array"
    EMPTY = "empty"

class NormalizedPayload(BaseModel):
    shape: ResponseShape
    live: List[Any] = []
    upcoming: List[Any] = []

class CanonicalCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    note: str = ""
    is_live: bool = False
    logo: str = ""
    league_logo: str = ""
    stream_ref: str = ""

class CardListResponse(BaseModel):
    shape: ResponseShape
    generated_at: datetime
    live: List[CanonicalCard] = []
    upcoming: List[CanonicalCard] = []

class WatchResponse(BaseModel):
    title: str
    src: str
