import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from bs4 import Tag

from matchwatch.core.config import settings
from matchwatch.core.errors import GatewayError
from matchwatch.core.http import RequestGateway
from matchwatch.models.schemas import CanonicalCard, NormalizedPayload
from matchwatch.services.cards import build_card
from matchwatch.services.modal import ModalCommand, ModalController
from matchwatch.services.player import StreamPlayer
from matchwatch.services.renderer import MultiSurfaceRenderer
from matchwatch.services.search import HOME_SCOPE, SEARCH_SCOPE, SearchBox
from matchwatch.sources.payload import split_payload
from matchwatch.ui.dom import has_class
from matchwatch.ui.page import Page

logger = logging.getLogger(__name__)


@dataclass
class Click:
    target: Tag


@dataclass
class KeyDown:
    key: str


@dataclass
class Input:
    field_id: str
    value: str


Event = Union[Click, KeyDown, Input]


@dataclass
class LoadResult:
    payload: NormalizedPayload
    live: List[CanonicalCard]
    upcoming: List[CanonicalCard]


class MatchBoard:
    """
    One page session: loads the match lists into the page and routes
    clicks, key presses and search input to the component that owns them.
    """

    def __init__(
        self,
        page: Optional[Page] = None,
        gateway: Optional[RequestGateway] = None,
        base_url: Optional[str] = None,
        open_delay_ms: Optional[int] = None,
        close_delay_ms: Optional[int] = None,
        debounce_ms: Optional[int] = None,
    ):
        self.page = page or Page()
        self.gateway = gateway or RequestGateway()
        self.base_url = (base_url or settings.SERVER_URL).rstrip("/")

        self.renderer = MultiSurfaceRenderer(self.page)
        self.modal = ModalController(self.page, open_delay_ms=open_delay_ms, close_delay_ms=close_delay_ms)
        self.player = StreamPlayer(self.page, self.modal, gateway=self.gateway, base_url=self.base_url)
        self.home_search = SearchBox(self.page, HOME_SCOPE, wait_ms=debounce_ms)
        self.page_search = SearchBox(self.page, SEARCH_SCOPE, wait_ms=debounce_ms)
        self._inputs = {}
        if self.page.home_search is not None:
            self._inputs["homeSearch"] = self.home_search
        if self.page.search_input is not None:
            self._inputs["searchPageInput"] = self.page_search

    async def load(self) -> Optional[LoadResult]:
        self.renderer.show_skeletons()
        try:
            data = await self.gateway.fetch_json(f"{self.base_url}/scrape")
        except GatewayError:
            logger.exception("loading matches failed")
            self.renderer.render_error()
            return None

        payload = split_payload(data)
        live = [build_card(m) for m in payload.live]
        upcoming = [build_card(m) for m in payload.upcoming]
        self.renderer.render(live, upcoming)
        logger.info(
            "loaded %d live / %d upcoming (%s)", len(live), len(upcoming), payload.shape.value
        )
        return LoadResult(payload=payload, live=live, upcoming=upcoming)

    async def watch(self, card: Tag) -> None:
        button = card.select_one(".watch-btn")
        if button is None:
            return
        await self.player.resolve_and_play(
            button, card.get("data-stream") or "", card.get("data-title") or ""
        )

    async def dispatch(self, event: Event) -> None:
        if isinstance(event, KeyDown):
            if event.key == "Escape":
                self.modal.dispatch(ModalCommand.CLOSE)
        elif isinstance(event, Input):
            box = self._inputs.get(event.field_id)
            if box is not None:
                box.on_input(event.value)
        elif isinstance(event, Click):
            await self._click(event.target)

    async def _click(self, target: Tag) -> None:
        page = self.page
        if page.modal is not None and target is page.modal:
            # backdrop only, clicks inside the card land on its children
            self.modal.dispatch(ModalCommand.CLOSE)
        elif page.close_button is not None and target is page.close_button:
            self.modal.dispatch(ModalCommand.CLOSE)
        elif has_class(target, "watch-btn"):
            card = target.find_parent(class_="match-card")
            if card is not None:
                await self.watch(card)
        elif has_class(target, "nav-item") and target.get("data-page"):
            page.navigate(target["data-page"])

