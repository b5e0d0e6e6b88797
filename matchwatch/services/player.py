import logging
from typing import Any, Optional
from urllib.parse import quote

from bs4 import Tag

from matchwatch.core.config import settings
from matchwatch.core.errors import (
    EmptyReferenceError,
    GatewayError,
    NoPlayableLinkError,
)
from matchwatch.core.http import RequestGateway
from matchwatch.services.modal import ModalController
from matchwatch.ui.dom import set_text
from matchwatch.ui.markup import LOADING_LABEL
from matchwatch.ui.page import Page

logger = logging.getLogger(__name__)

# checked in this order
LINK_FIELDS = ("realLink", "stream", "url", "play")
STREAM_ERROR_NOTICE = "Error loading stream"
# same unreserved set as encodeURIComponent
_URI_SAFE = "!~*'()"

def stream_endpoint(base_url: str, stream_ref: str) -> str:
    return f"{base_url.rstrip('/')}/stream?url={quote(stream_ref, safe=_URI_SAFE)}"

def pick_link(response: Any) -> Optional[str]:
    if not isinstance(response, dict):
        return None
    for field in LINK_FIELDS:
        value = response.get(field)
        if isinstance(value, str) and value:
            return value
    return None

class StreamPlayer:
    """Turns a card's stream reference into a playable link and opens it in the modal."""

    def __init__(
        self,
        page: Page,
        modal: ModalController,
        gateway: Optional[RequestGateway] = None,
        base_url: Optional[str] = None,
    ):
        self.page = page
        self.modal = modal
        self.gateway = gateway or RequestGateway()
        self.base_url = base_url or settings.SERVER_URL

    async def resolve(self, stream_ref: str) -> str:
        if not stream_ref:
            raise EmptyReferenceError()
        res = await self.gateway.fetch_json(stream_endpoint(self.base_url, stream_ref))
        link = pick_link(res)
        if link is None:
            error = res.get("error") if isinstance(res, dict) else None
            raise NoPlayableLinkError(error if isinstance(error, str) else None)
        return link

    async def resolve_and_play(self, button: Tag, stream_ref: str, title: str) -> None:
        if button.has_attr("disabled"):
            return

        original = button.get_text()
        button["disabled"] = "disabled"
        set_text(button, LOADING_LABEL)
        try:
            link = await self.resolve(stream_ref)
        except (EmptyReferenceError, NoPlayableLinkError) as e:
            self.page.alert(str(e))
        except GatewayError:
            logger.exception("stream resolution failed for %s", stream_ref)
            self.page.alert(STREAM_ERROR_NOTICE)
        else:
            self.modal.show(link, title)
        finally:
            del button["disabled"]
            set_text(button, original)
