from bs4 import BeautifulSoup, Tag

from matchwatch.models.schemas import CanonicalCard

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_ESCAPE_TABLE = str.maketrans(_HTML_ESCAPES)

WATCH_LABEL = "▶ Watch"
LOADING_LABEL = "Loading..."
ERROR_TEXT = "Error loading matches"

def escape_html(value) -> str:
    """Neutralize the five HTML-significant characters."""
    if value is None:
        return ""
    return str(value).translate(_ESCAPE_TABLE)

def card_markup(card: CanonicalCard) -> str:
    badge = ' <span class="live-badge">LIVE</span>' if card.is_live else ""
    logo = (
        f'<img src="{escape_html(card.logo)}" class="team-logo" alt="logo" />'
        if card.logo else ""
    )
    note = f'<div class="match-note">{escape_html(card.note)}</div>' if card.note else ""
    league_logo = (
        f'<img src="{escape_html(card.league_logo)}" class="league-logo" alt="league" />'
        if card.league_logo else ""
    )
    return (
        f'<div class="match-card" data-stream="{escape_html(card.stream_ref)}" '
        f'data-title="{escape_html(card.title)}">'
        '<div class="flex items-center gap-3">'
        f"{logo}"
        '<div class="flex-1">'
        f'<div class="match-title">{escape_html(card.title)}{badge}</div>'
        f"{note}"
        "</div>"
        f"{league_logo}"
        "</div>"
        f'<button class="watch-btn mt-3 w-full">{WATCH_LABEL}</button>'
        "</div>"
    )

SKELETON_MARKUP = (
    '<div class="skeleton">'
    '<div class="flex items-center gap-4">'
    '<div class="w-12 h-12 rounded-full bg-gray-700"></div>'
    '<div class="flex-1">'
    '<div class="skeleton-line"></div>'
    '<div class="skeleton-line short"></div>'
    "</div>"
    "</div>"
    '<div class="flex justify-center mt-4">'
    '<div class="skeleton-line" style="width:60%;height:32px;"></div>'
    "</div>"
    "</div>"
)

ERROR_MARKUP = f'<p class="text-red-500 text-center">{ERROR_TEXT}</p>'

def fragment(markup: str) -> Tag:
    """Parse a single-root HTML fragment into a detached tag."""
    soup = BeautifulSoup(markup, "html.parser")
    root = next(c for c in soup.contents if isinstance(c, Tag))
    return root.extract()

def build_card_tag(card: CanonicalCard, compact: bool = False) -> Tag:
    tag = fragment(card_markup(card))
    if compact:
        tag["class"] = tag.get("class", []) + ["p-3"]
    return tag
