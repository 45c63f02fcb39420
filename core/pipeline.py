import time
from typing import Callable, Dict, List
from config.settings import Settings
from config.logging_config import log
from core.base_scraper import BaseScraper
from core.models import Listing, SearchDefinition
from core.triage import TriageEngine


class ScrapingPipeline:
    def __init__(
        self,
        scraper: BaseScraper,
        engine: TriageEngine,
        searches: List[SearchDefinition],
        settings: Settings,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.scraper = scraper
        self.engine = engine
        self.searches = searches
        self.delay = settings.SCRAPE_DELAY_SECONDS
        self.sleep = sleep

    def run(self) -> Dict[str, List[Listing]]:
        log.info("Starting scraping pipeline...")
        self.scraper.warm_up()
        results: Dict[str, List[Listing]] = {}
        for search in self.searches:
            try:
                new_listings = self._run_search(search)
            except Exception as e:
                log.error(f"Scrape/triage failed for {search.key}: {e}")
                new_listings = []
            results[search.key] = new_listings

            # Pause after every search, the last one included
            self.sleep(self.delay)

        summary = " | ".join(f"{key}={len(found)}" for key, found in results.items())
        log.info(f"Pipeline completed. New listings: {summary}")
        return results

    def _run_search(self, search: SearchDefinition) -> List[Listing]:
        log.info(f"Running search: {search.key}")
        result = self.scraper.fetch_page(search.url)
        if not result.ok:
            log.error(f"Failed fetching URL {search.url}: {result.error}")
            return []

        cards = self.scraper.extract_cards(result.page)
        if not cards:
            log.info(f"No listing elements found on page {search.url} using selector: {self.scraper.card_selector}")
            return []

        listings = [self.scraper.parse_listing(card, search.beds) for card in cards]
        valid = [l for l in listings if l.is_complete()]
        if not valid:
            log.debug(f"Parsing found {len(cards)} elements but no valid data for {search.key}")
            return []

        return self.engine.triage(valid, search.dataset)
