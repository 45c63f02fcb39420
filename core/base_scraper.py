from abc import ABC, abstractmethod
from typing import List, Optional
import requests
from bs4 import BeautifulSoup, Tag
from config.settings import Settings
from config.logging_config import log
from core.models import FetchResult, Listing

class BaseScraper(ABC):
    card_selector: str = ""

    def __init__(self, source_name: str, settings: Settings, session: Optional[requests.Session] = None):
        self.source_name = source_name
        self.settings = settings
        self.base_url = settings.BASE_URL
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": settings.user_agent
        })

    def warm_up(self) -> bool:
        """
        Visit the site origin once so the session carries its cookies.
        Not fatal: search pages are still attempted if this fails.
        """
        try:
            response = self.session.get(self.base_url, timeout=self.settings.REQUEST_TIMEOUT)
            response.raise_for_status()
            return True
        except requests.RequestException as e:
            log.warning(f"[{self.source_name}] Session warm-up failed for {self.base_url}: {e}")
            return False

    def fetch_page(self, url: str) -> FetchResult:
        """Single GET through the shared session. Transport errors come back as a result, not an exception."""
        try:
            response = self.session.get(url, timeout=self.settings.REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            return FetchResult(url=url, error=str(e))
        return FetchResult(url=url, page=BeautifulSoup(response.text, "lxml"))

    @abstractmethod
    def extract_cards(self, page: BeautifulSoup) -> List[Tag]:
        """
        Returns every listing-card fragment on a results page, possibly none.
        """
        pass

    @abstractmethod
    def parse_listing(self, card: Tag, beds: int) -> Listing:
        """
        Parses one listing card into a Listing model.
        """
        pass
