"""
The page's single player modal.

    Closed --open--> Opening --(open delay)--> Open
    Open --close--> Closing --(close delay)--> Closed

All writes to the modal's classes and iframe source go through this
controller. Phase changes are checked against TRANSITIONS and reported
to listeners. Delays are scheduled on the running event loop, never
slept on.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional

from matchwatch.core.config import settings
from matchwatch.core.errors import InvalidTransition
from matchwatch.ui.dom import add_class, remove_class, set_text
from matchwatch.ui.page import Page

logger = logging.getLogger(__name__)


class ModalState(str, Enum):
    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    CLOSING = "closing"


class ModalCommand(str, Enum):
    OPEN = "open"
    CLOSE = "close"


TRANSITIONS = {
    ModalState.CLOSED: {ModalState.OPENING},
    ModalState.OPENING: {ModalState.OPEN, ModalState.CLOSING},
    ModalState.OPEN: {ModalState.CLOSING},
    # a new open request supersedes a pending close
    ModalState.CLOSING: {ModalState.CLOSED, ModalState.OPENING},
}

TransitionListener = Callable[[ModalState, ModalState], None]


class ModalController:
    def __init__(
        self,
        page: Page,
        open_delay_ms: Optional[int] = None,
        close_delay_ms: Optional[int] = None,
    ):
        self.page = page
        self.open_delay = (open_delay_ms if open_delay_ms is not None else settings.MODAL_OPEN_DELAY_MS) / 1000
        self.close_delay = (close_delay_ms if close_delay_ms is not None else settings.MODAL_CLOSE_DELAY_MS) / 1000
        self.state = ModalState.CLOSED
        self._timer: Optional[asyncio.TimerHandle] = None
        self._listeners: List[TransitionListener] = []

    @property
    def available(self) -> bool:
        return self.page.modal is not None

    @property
    def src(self) -> str:
        iframe = self.page.modal_iframe
        return (iframe.get("src") or "") if iframe is not None else ""

    def on_transition(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def _transition(self, target: ModalState) -> None:
        if target not in TRANSITIONS[self.state]:
            raise InvalidTransition(f"{self.state.value} -> {target.value}")
        previous, self.state = self.state, target
        logger.debug("modal %s -> %s", previous.value, target.value)
        for listener in self._listeners:
            listener(previous, target)

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().call_later(delay, callback)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def dispatch(self, command: ModalCommand) -> None:
        if command == ModalCommand.OPEN:
            self.open()
        elif command == ModalCommand.CLOSE:
            self.close()

    def show(self, src: str, title: str) -> None:
        """Load content and open. Reuses the open modal if it is already up."""
        if not self.available:
            return
        if self.page.modal_iframe is not None:
            self.page.modal_iframe["src"] = src
        if self.page.modal_title is not None:
            set_text(self.page.modal_title, title)
        self.open()

    def open(self) -> None:
        if not self.available or self.state in (ModalState.OPENING, ModalState.OPEN):
            return
        self._cancel_timer()
        remove_class(self.page.modal, "hidden")
        if self.page.body is not None:
            add_class(self.page.body, "modal-open")
        self._transition(ModalState.OPENING)
        self._schedule(self.open_delay, self._finish_open)

    def _finish_open(self) -> None:
        self._timer = None
        add_class(self.page.modal, "modal-show")
        if self.page.modal_card is not None:
            add_class(self.page.modal_card, "modal-card-show")
        self._transition(ModalState.OPEN)

    def close(self) -> None:
        if not self.available or self.state in (ModalState.CLOSED, ModalState.CLOSING):
            return
        self._cancel_timer()
        remove_class(self.page.modal, "modal-show")
        if self.page.modal_card is not None:
            remove_class(self.page.modal_card, "modal-card-show")
        # stop playback right away
        if self.page.modal_iframe is not None:
            self.page.modal_iframe["src"] = ""
        self._transition(ModalState.CLOSING)
        self._schedule(self.close_delay, self._finish_close)

    def _finish_close(self) -> None:
        self._timer = None
        add_class(self.page.modal, "hidden")
        if self.page.body is not None:
            remove_class(self.page.body, "modal-open")
        self._transition(ModalState.CLOSED)
