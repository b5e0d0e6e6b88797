import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from matchwatch.ui.dom import add_class, remove_class

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8" /><title>Live Matches</title></head>
<body>
  <nav>
    <button class="nav-item active" data-page="home">Home</button>
    <button class="nav-item" data-page="live">Live</button>
    <button class="nav-item" data-page="upcoming">Upcoming</button>
    <button class="nav-item" data-page="search">Search</button>
  </nav>
  <section id="home" class="page">
    <input id="homeSearch" type="search" placeholder="Search matches" />
    <div id="homeLivePreview"></div>
  </section>
  <section id="live" class="page hidden"><div id="matches"></div></section>
  <section id="upcoming" class="page hidden"><div id="upcomingMatches"></div></section>
  <section id="search" class="page hidden">
    <input id="searchPageInput" type="search" placeholder="Search all matches" />
    <div id="searchResults"></div>
  </section>
  <div id="modal" class="modal hidden">
    <div class="modal-card">
      <div class="modal-header">
        <h3 id="modalTitle"></h3>
        <button id="closeModal">&times;</button>
      </div>
      <iframe id="modalIframe" src="" allowfullscreen></iframe>
    </div>
  </div>
</body>
</html>
"""

class Page:
    """
    The document the board renders into.

    Containers are looked up once. A missing one stays None and whatever
    targets it skips its work.
    """

    def __init__(self, markup: str = PAGE_TEMPLATE):
        self.soup = BeautifulSoup(markup, "lxml")
        self.body: Optional[Tag] = self.soup.body

        self.matches = self.soup.find(id="matches")
        self.upcoming = self.soup.find(id="upcomingMatches")
        self.home_preview = self.soup.find(id="homeLivePreview")
        self.search_results = self.soup.find(id="searchResults")

        self.home_search = self.soup.find(id="homeSearch")
        self.search_input = self.soup.find(id="searchPageInput")

        self.modal = self.soup.find(id="modal")
        self.modal_card = self.modal.select_one(".modal-card") if self.modal is not None else None
        self.modal_iframe = self.soup.find(id="modalIframe")
        self.modal_title = self.soup.find(id="modalTitle")
        self.close_button = self.soup.find(id="closeModal")

        self.notices: List[str] = []

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def alert(self, message: str) -> None:
        logger.info("notice: %s", message)
        self.notices.append(message)

    def navigate(self, page_id: str) -> None:
        for item in self.soup.select(".nav-item"):
            if item.get("data-page") == page_id:
                add_class(item, "active")
            else:
                remove_class(item, "active")
        for section in self.soup.select(".page"):
            if section.get("id") == page_id:
                remove_class(section, "hidden")
            else:
                add_class(section, "hidden")

    def to_html(self) -> str:
        return str(self.soup)
