import copy
import logging
from typing import Optional, Sequence

from bs4 import Tag

from matchwatch.core.config import settings
from matchwatch.models.schemas import CanonicalCard
from matchwatch.ui.dom import replace_children
from matchwatch.ui.markup import ERROR_MARKUP, SKELETON_MARKUP, build_card_tag, fragment
from matchwatch.ui.page import Page

logger = logging.getLogger(__name__)


class MultiSurfaceRenderer:
    """
    Writes cards into the four list surfaces of a page.

    Every surface gets its own tags; the search index is filled with
    copies of the rendered list cards, so hiding a node in one surface
    never hides it anywhere else. Each render replaces surface contents
    wholesale.
    """

    def __init__(
        self,
        page: Page,
        skeleton_count: Optional[int] = None,
        home_skeleton_count: Optional[int] = None,
        home_preview_limit: Optional[int] = None,
    ):
        self.page = page
        self.skeleton_count = skeleton_count if skeleton_count is not None else settings.SKELETON_COUNT
        self.home_skeleton_count = (
            home_skeleton_count if home_skeleton_count is not None else settings.HOME_SKELETON_COUNT
        )
        self.home_preview_limit = (
            home_preview_limit if home_preview_limit is not None else settings.HOME_PREVIEW_LIMIT
        )

    @staticmethod
    def _skeleton(target: Optional[Tag], count: int) -> None:
        if target is None:
            return
        replace_children(target, (fragment(SKELETON_MARKUP) for _ in range(count)))

    def show_skeletons(self) -> None:
        self._skeleton(self.page.matches, self.skeleton_count)
        self._skeleton(self.page.upcoming, self.skeleton_count)
        self._skeleton(self.page.home_preview, self.home_skeleton_count)

    def render(self, live: Sequence[CanonicalCard], upcoming: Sequence[CanonicalCard]) -> None:
        page = self.page
        live_tags = [build_card_tag(c) for c in live]
        upcoming_tags = [build_card_tag(c) for c in upcoming]

        if page.matches is not None:
            replace_children(page.matches, live_tags)
        if page.upcoming is not None:
            replace_children(page.upcoming, upcoming_tags)
        if page.home_preview is not None:
            replace_children(
                page.home_preview,
                (build_card_tag(c, compact=True) for c in live[: self.home_preview_limit]),
            )
        if page.search_results is not None:
            replace_children(page.search_results, (copy.copy(t) for t in live_tags + upcoming_tags))

        logger.debug("rendered %d live / %d upcoming cards", len(live), len(upcoming))

    def render_error(self) -> None:
        """Error state for the list surfaces. The search index keeps its last contents."""
        if self.page.matches is not None:
            replace_children(self.page.matches, [fragment(ERROR_MARKUP)])
        if self.page.upcoming is not None:
            replace_children(self.page.upcoming)
        if self.page.home_preview is not None:
            replace_children(self.page.home_preview)
