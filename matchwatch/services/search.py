import asyncio
import logging
from typing import Any, Callable, Optional

from bs4 import NavigableString, Tag

from matchwatch.core.config import settings
from matchwatch.ui.dom import set_display
from matchwatch.ui.page import Page

logger = logging.getLogger(__name__)

HOME_SCOPE = "#homeLivePreview .match-card, #matches .match-card"
SEARCH_SCOPE = "#searchResults .match-card"


def card_title_text(card: Tag) -> str:
    # direct text only, the LIVE badge is a child span
    title = card.select_one(".match-title")
    if title is None:
        return ""
    return "".join(s for s in title.children if isinstance(s, NavigableString)).strip()


def apply_filter(page: Page, query: str, scope: str) -> int:
    """
    Show the cards in `scope` whose title contains `query`, hide the rest.

    Only the inline display property changes; nodes are never removed or
    reordered. Returns the number of visible cards.
    """
    q = (query or "").strip().lower()
    visible = 0
    for node in page.select(scope):
        show = not q or q in card_title_text(node).lower()
        set_display(node, "" if show else "none")
        visible += show
    return visible


class Debouncer:
    """Runs `fn` once the calls stop for `wait` seconds, with the last arguments."""

    def __init__(self, fn: Callable[..., Any], wait: float):
        self.fn = fn
        self.wait = wait
        self._handle: Optional[asyncio.TimerHandle] = None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        self._handle = asyncio.get_running_loop().call_later(self.wait, self._fire, args)

    def _fire(self, args: tuple) -> None:
        self._handle = None
        self.fn(*args)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class SearchBox:
    """One search input bound to one filter scope, with its own debounce timer."""

    def __init__(self, page: Page, scope: str, wait_ms: Optional[int] = None):
        self.page = page
        self.scope = scope
        wait = (wait_ms if wait_ms is not None else settings.SEARCH_DEBOUNCE_MS) / 1000
        self._debounced = Debouncer(self._apply, wait)

    def on_input(self, value: str) -> None:
        self._debounced(value.strip().lower())

    def _apply(self, query: str) -> None:
        visible = apply_filter(self.page, query, self.scope)
        logger.debug("filter %r on %s: %d visible", query, self.scope, visible)
