from typing import List, Set, Tuple
import pandas as pd
from config.settings import Settings
from config.logging_config import log
from core.models import Listing, SHEET_COLUMNS
from database.base_store import BaseStore, StorageError, empty_frame


class TriageEngine:
    """
    Decides which freshly scraped listings are new for a dataset and persists them.

    The link is the only identity: a link already in the dataset is never
    written again, whatever its title or price look like now. Listings without
    a link or a price are dropped.
    """

    def __init__(self, store: BaseStore, settings: Settings):
        self.store = store
        self.new_listings_sheet = settings.NEW_LISTINGS_SHEET
        self.clear_range = settings.NEW_LISTINGS_CLEAR_RANGE

    def triage(self, listings: List[Listing], dataset: str) -> List[Listing]:
        existing, read_ok = self._load_existing(dataset)
        known = self._known_links(existing)

        new_listings = []
        for l in listings:
            if not l.link or not (l.price and l.price.strip()):
                continue
            link = str(l.link)
            if link in known:
                continue
            # same card twice on one page: first one wins
            known.add(link)
            new_listings.append(l)

        # Nothing new leaves the latest batch view as it was
        if not new_listings:
            return new_listings

        try:
            if read_ok:
                # Header occupies row 1, data rows follow it without gaps
                start_row = len(existing) + 2
                self.store.append_at(dataset, f"A{start_row}", new_listings, include_headers=False)
            else:
                # Row count unknown, let the store find the end of the table
                self.store.append(dataset, new_listings)
        except StorageError as e:
            log.error(f"Writing listings to sheet '{dataset}': {e}")

        try:
            self.store.clear_range(self.new_listings_sheet, self.clear_range)
        except StorageError as e:
            log.error(f"Clearing '{self.new_listings_sheet}' sheet: {e}")

        try:
            self.store.append_at(self.new_listings_sheet, "A1", new_listings, include_headers=True)
        except StorageError as e:
            log.error(f"Updating '{self.new_listings_sheet}' sheet: {e}")

        log.info(f"{len(new_listings)} new listing(s) added to '{dataset}'")
        return new_listings

    def _load_existing(self, dataset: str) -> Tuple[pd.DataFrame, bool]:
        try:
            return self.store.read_all(dataset, SHEET_COLUMNS), True
        except StorageError as e:
            # Fail open: a bad read may re-insert rows, but never stops the run
            log.error(f"Reading Google Sheet '{dataset}': {e}. Assuming empty.")
            return empty_frame(SHEET_COLUMNS), False

    def _known_links(self, existing: pd.DataFrame) -> Set[str]:
        if "link" not in existing.columns:
            return set()
        return set(existing["link"].dropna().map(str))
