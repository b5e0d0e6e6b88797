from typing import Any

from matchwatch.models.schemas import CanonicalCard
from matchwatch.sources.parsing import as_record, first_text

FALLBACK_TITLE = "Untitled"

def build_card(raw: Any) -> CanonicalCard:
    """Reduce one upstream record to a display card. Never raises."""
    rec = as_record(raw)

    raw_note = first_text(rec, "note")
    home = first_text(rec, "home")
    away = first_text(rec, "away")

    title = first_text(rec, "title")
    if title is None:
        if home and away:
            title = f"{home} vs {away}"
        else:
            title = raw_note or FALLBACK_TITLE

    note = raw_note
    if note is None:
        league = first_text(rec, "league")
        note = f"{league} • {first_text(rec, 'time') or ''}" if league else ""

    return CanonicalCard(
        title=title,
        note=note,
        is_live="LIVE" in (raw_note or "").upper(),
        logo=first_text(rec, "logo", "home_logo") or "",
        league_logo=first_text(rec, "leagueLogo", "league_logo") or "",
        stream_ref=first_text(rec, "stream", "link", "url") or "",
    )
