from typing import List, Optional
from bs4 import BeautifulSoup, Tag
from core.base_scraper import BaseScraper
from core.models import Listing
from config.settings import Settings

CARD_SELECTOR = '[data-testid="listing-card"]'
TITLE_SELECTOR = '[data-testid="listing-title"]'
PRICE_SELECTOR = '[data-testid="listing-price"]'
# |= also matches suffixed test ids such as listing-link-12345
DESCRIPTION_SELECTOR = '[data-testid|="listing-description"]'
LINK_SELECTOR = '[data-testid|="listing-link"]'


def clean_text(s: str) -> str:
    return " ".join(s.split()).strip()


class KijijiScraper(BaseScraper):
    card_selector = CARD_SELECTOR

    def __init__(self, settings: Settings, session=None):
        super().__init__("kijiji", settings, session=session)

    def extract_cards(self, page: BeautifulSoup) -> List[Tag]:
        return page.select(self.card_selector)

    def parse_listing(self, card: Tag, beds: int) -> Listing:
        title_tag = card.select_one(TITLE_SELECTOR)
        price_tag = card.select_one(PRICE_SELECTOR)
        desc_tag = card.select_one(DESCRIPTION_SELECTOR)
        link_tag = card.select_one(LINK_SELECTOR)

        title = clean_text(title_tag.get_text(" ")) if title_tag else None
        price = price_tag.get_text(strip=True) if price_tag else None
        description = clean_text(desc_tag.get_text(" ")) if desc_tag else None
        link_raw = link_tag.get("href") if link_tag else None

        return Listing(
            title=title,
            price=price,
            description=description,
            link=self._absolute_link(link_raw),
            beds=beds,
        )

    def _absolute_link(self, href: Optional[str]) -> Optional[str]:
        if not href:
            return None
        if href.startswith("http"):
            return href
        if href.startswith("/"):
            return f"{self.base_url}{href}"
        return href
